import pytest

from edastructs.black_sheep import count_white_sheep


def _picture(sheep):
    """A row of ``sheep`` 3x3 outlines, each enclosing one '.' cell."""
    width = 4 * sheep + 1
    blank = "." * width
    top = "." + "XXX." * sheep
    middle = "." + "X.X." * sheep
    return [blank, top, middle, top, blank]


@pytest.mark.parametrize("sheep", [0, 1, 2, 5])
def test_counts_enclosed_regions(sheep):
    assert count_white_sheep(_picture(sheep)) == sheep


@pytest.mark.parametrize("sheep", [1, 3])
def test_open_outline_is_not_a_sheep(sheep):
    picture = _picture(sheep)
    # break the bottom edge of the first outline so its inside joins the background
    picture[3] = picture[3][:2] + "." + picture[3][3:]
    assert count_white_sheep(picture) == sheep - 1


def test_diagonal_contact_does_not_join_regions():
    picture = [
        "XXXXX",
        "X.XXX",
        "XX.XX",
        "XXXXX",
    ]
    assert count_white_sheep(picture) == 1


def test_no_background_gives_minus_one():
    assert count_white_sheep(["XX", "XX"]) == -1


def test_empty_image_is_rejected():
    with pytest.raises(ValueError):
        count_white_sheep([])


def test_ragged_image_is_rejected():
    with pytest.raises(ValueError):
        count_white_sheep(["...", ".."])