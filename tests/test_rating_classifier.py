import pytest

from bingemap.models.media import RatingBucket
from bingemap.services.ratings import classify_rating, rating_legend


@pytest.mark.parametrize(
    "rating, expected",
    [
        (10.0, RatingBucket.TOP),
        (8.5, RatingBucket.TOP),
        (8.49999, RatingBucket.HIGH),
        (7.6, RatingBucket.HIGH),
        (7.59, RatingBucket.MID),
        (6.5, RatingBucket.MID),
        (6.49999, RatingBucket.LOW),
        (0.0, RatingBucket.LOW),
    ],
)
def test_bucket_boundaries(rating, expected):
    """Lower bounds are inclusive and each rating lands in exactly one bucket."""
    assert classify_rating(rating).bucket == expected


def test_colours_match_legend_constants():
    top = classify_rating(9.0)
    assert top.fill_color == "#2ad100ff"
    assert top.text_color == "#1b8700"

    high = classify_rating(8.0)
    assert high.fill_color == "#ffe600ff"
    assert high.text_color == "#d1bc00"

    mid = classify_rating(7.0)
    assert mid.fill_color == "#fca311"
    assert mid.text_color == "#c47e00"

    low = classify_rating(3.0)
    assert low.fill_color == "#f12d2dff"
    assert low.text_color == "#b31b1b"


def test_returned_style_is_independent_copy():
    style = classify_rating(9.0)
    style.fill_color = "#000000"
    assert classify_rating(9.0).fill_color == "#2ad100ff"


def test_legend_order_and_labels():
    legend = rating_legend()
    assert [entry.bucket for entry in legend] == [
        RatingBucket.TOP,
        RatingBucket.HIGH,
        RatingBucket.MID,
        RatingBucket.LOW,
    ]
    assert [entry.label for entry in legend] == [
        "8.5–10.0",
        "7.6–8.4",
        "6.5–7.5",
        "0.0–6.4",
    ]


def test_legend_colours_agree_with_classifier():
    for entry, sample in zip(rating_legend(), [9.0, 8.0, 7.0, 6.0]):
        style = classify_rating(sample)
        assert entry.fill_color == style.fill_color
        assert entry.text_color == style.text_color
