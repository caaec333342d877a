import re
from datetime import datetime

from folderrunner.namer import destination_name, timestamp_suffix

STAMPED = re.compile(r"^a_\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}\.txt$")


def test_plain_name_kept_without_flag():
    assert destination_name("a.txt", False) == "a.txt"


def test_suffix_inserted_before_extension():
    assert STAMPED.match(destination_name("a.txt", True))


def test_fixed_time_suffix():
    now = datetime(2024, 1, 31, 13, 5, 9)

    assert timestamp_suffix(now) == "_2024-01-31_13-05-09"
    assert destination_name("report.csv", True, now) == "report_2024-01-31_13-05-09.csv"


def test_only_last_extension_is_split():
    now = datetime(2024, 1, 31, 13, 5, 9)

    assert destination_name("logs.tar.gz", True, now) == "logs.tar_2024-01-31_13-05-09.gz"


def test_name_without_extension_gets_trailing_suffix():
    now = datetime(2024, 1, 31, 13, 5, 9)

    assert destination_name("README", True, now) == "README_2024-01-31_13-05-09"
