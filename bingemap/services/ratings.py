"""Rating classification into fixed heatmap buckets."""

from typing import List

from bingemap.models.media import LegendEntry, RatingBucket, RatingStyle

# Lower bounds are inclusive. Keep in descending order.
TOP_THRESHOLD = 8.5
HIGH_THRESHOLD = 7.6
MID_THRESHOLD = 6.5

BUCKET_STYLES = {
    RatingBucket.TOP: RatingStyle(
        bucket=RatingBucket.TOP, fill_color="#2ad100ff", text_color="#1b8700"
    ),
    RatingBucket.HIGH: RatingStyle(
        bucket=RatingBucket.HIGH, fill_color="#ffe600ff", text_color="#d1bc00"
    ),
    RatingBucket.MID: RatingStyle(
        bucket=RatingBucket.MID, fill_color="#fca311", text_color="#c47e00"
    ),
    RatingBucket.LOW: RatingStyle(
        bucket=RatingBucket.LOW, fill_color="#f12d2dff", text_color="#b31b1b"
    ),
}

LEGEND_LABELS = {
    RatingBucket.TOP: "8.5–10.0",
    RatingBucket.HIGH: "7.6–8.4",
    RatingBucket.MID: "6.5–7.5",
    RatingBucket.LOW: "0.0–6.4",
}


def rating_bucket(rating: float) -> RatingBucket:
    """Return the bucket a rating falls into."""
    if rating >= TOP_THRESHOLD:
        return RatingBucket.TOP
    if rating >= HIGH_THRESHOLD:
        return RatingBucket.HIGH
    if rating >= MID_THRESHOLD:
        return RatingBucket.MID
    return RatingBucket.LOW


def classify_rating(rating: float) -> RatingStyle:
    """Map a rating to its bucket and the matching fill/text colours."""
    return BUCKET_STYLES[rating_bucket(rating)].model_copy()


def rating_legend() -> List[LegendEntry]:
    """Legend entries for every bucket, best first."""
    return [
        LegendEntry(
            bucket=bucket,
            label=LEGEND_LABELS[bucket],
            fill_color=style.fill_color,
            text_color=style.text_color,
        )
        for bucket, style in BUCKET_STYLES.items()
    ]
