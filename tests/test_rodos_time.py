import io

import pytest

from cobcsw.rodos_time import (
    RODOS_UNIX_OFFSET,
    SECONDS,
    format_time,
    print_time,
    rodos_to_unix_time,
    unix_to_rodos_time,
)


def test_rodos_epoch_in_unix_time():
    assert unix_to_rodos_time(946_684_800) == 0
    assert rodos_to_unix_time(0) == 946_684_800


def test_unix_epoch_is_negative_offset():
    assert unix_to_rodos_time(0) == -RODOS_UNIX_OFFSET


@pytest.mark.parametrize("unix_time", [0, 946_684_800, 1_672_531_200, 1_672_531_260, 2**31 - 1])
def test_round_trip(unix_time):
    assert rodos_to_unix_time(unix_to_rodos_time(unix_time)) == unix_time


def test_sub_second_part_is_dropped():
    base = unix_to_rodos_time(1_672_531_200)
    assert rodos_to_unix_time(base + SECONDS - 1) == 1_672_531_200


def test_out_of_range_unix_time_is_rejected():
    with pytest.raises(ValueError):
        unix_to_rodos_time(2**31)


def test_format_rodos_epoch():
    assert format_time(0) == "DateUTC(DD/MM/YYYY HH:MIN:SS) : 01/01/2000 00:00:00"


def test_format_first_january_2023():
    text = format_time(unix_to_rodos_time(1_672_531_200))
    assert text == "DateUTC(DD/MM/YYYY HH:MIN:SS) : 01/01/2023 00:00:00"


def test_format_truncates_fractional_seconds():
    assert format_time(SECONDS - 1) == format_time(0)
    assert format_time(SECONDS) != format_time(0)


def test_print_time_writes_formatted_line():
    stream = io.StringIO()
    rodos_time = unix_to_rodos_time(1_672_531_260)
    print_time(rodos_time, stream)
    assert stream.getvalue() == format_time(rodos_time) + "\n"


def test_current_time_is_after_rodos_epoch():
    assert rodos_to_unix_time() > 946_684_800
    assert format_time().startswith("DateUTC(DD/MM/YYYY HH:MIN:SS) : ")