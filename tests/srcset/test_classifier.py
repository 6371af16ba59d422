from orgimage.srcset.classifier import LinkClassifier
from orgimage.srcset.types import ImageLink


def test_classify_groups_by_type_and_size():
    links = [
        ImageLink.of("a.jpg", "image/jpeg", ["tile", "min"]),
        ImageLink.of("b.jpg", "image/jpeg", ["tile", "min", "high-density"]),
        ImageLink.of("c.webp", "image/webp", ["tile", "max"]),
        ImageLink.of("d.webp", "image/webp", ["tile", "mid", "high-density"]),
    ]

    result = LinkClassifier.classify(links)

    assert result == {
        "image/jpeg": {"lowMin": "a.jpg", "highMin": "b.jpg"},
        "image/webp": {"lowMax": "c.webp", "highMid": "d.webp"},
    }
    # Media types keep first-seen order
    assert list(result) == ["image/jpeg", "image/webp"]


def test_links_without_size_class_are_dropped():
    links = [
        ImageLink.of("a.jpg", "image/jpeg", ["tile"]),
        ImageLink.of("b.jpg", "image/jpeg", ["tile", "high-density"]),
        ImageLink.of("c.png", "image/png", ["tile", "huge"]),
        ImageLink.of("d.jpg", "image/jpeg", ["tile", "mid"]),
    ]

    result = LinkClassifier.classify(links)

    # 1. Only the sized link survives
    assert result == {"image/jpeg": {"lowMid": "d.jpg"}}
    # 2. A type with no classifiable link gets no entry at all
    assert "image/png" not in result


def test_duplicate_keys_last_wins():
    links = [
        ImageLink.of("first.jpg", "image/jpeg", ["max"]),
        ImageLink.of("second.jpg", "image/jpeg", ["max"]),
    ]

    assert LinkClassifier.classify(links) == {"image/jpeg": {"lowMax": "second.jpg"}}


def test_conflicting_size_classes_resolve_in_min_mid_max_order():
    link = ImageLink.of("x.jpg", "image/jpeg", ["max", "mid", "min"])
    assert LinkClassifier.size_key(link) == "lowMin"

    link = ImageLink.of("y.jpg", "image/jpeg", ["max", "mid", "high-density"])
    assert LinkClassifier.size_key(link) == "highMid"


def test_classify_empty_input():
    assert LinkClassifier.classify([]) == {}
