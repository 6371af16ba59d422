from orgimage.srcset.selector import BestTypeSelector


def test_jpeg_is_preferred_regardless_of_order():
    links_by_type = {
        "image/webp": {"lowMin": "a.webp"},
        "image/png": {"lowMin": "a.png"},
        "image/jpeg": {"lowMin": "a.jpg"},
    }

    assert BestTypeSelector.select_best(links_by_type) == {"lowMin": "a.jpg"}


def test_first_type_is_used_without_jpeg():
    links_by_type = {
        "image/webp": {"lowMin": "a.webp"},
        "image/png": {"lowMin": "a.png"},
    }

    assert BestTypeSelector.select_best(links_by_type) == {"lowMin": "a.webp"}


def test_select_best_empty():
    assert BestTypeSelector.select_best({}) is None


def test_default_link_is_size_major():
    # lowMax beats highMid: larger size first, density second
    assert BestTypeSelector.select_default_link({"lowMax": "A", "highMid": "B"}) == "A"
    assert BestTypeSelector.select_default_link({"lowMax": "A", "highMax": "B"}) == "B"
    assert BestTypeSelector.select_default_link({"lowMin": "A", "highMin": "B"}) == "B"
    assert BestTypeSelector.select_default_link({"lowMin": "A"}) == "A"


def test_default_link_without_sizes():
    assert BestTypeSelector.select_default_link(None) is None
    assert BestTypeSelector.select_default_link({}) is None
