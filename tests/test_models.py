from apod.models import DetailView, GalleryState, Item


def test_detail_prefers_hd_image():
    item = Item(image_url="https://x/a_small.jpg", title="A", hd_url="https://x/a.jpg")
    view = DetailView.open(item)
    assert view.is_open
    assert view.image_src == "https://x/a.jpg"
    assert view.alt == "A"


def test_detail_falls_back_to_image_url_and_placeholder_alt():
    view = DetailView.open(Item(image_url="https://x/b.jpg", title=""))
    assert view.image_src == "https://x/b.jpg"
    assert view.alt == "NASA APOD"


def test_closed_detail_has_no_image():
    view = DetailView.open(Item(image_url="https://x/b.jpg")).close()
    assert not view.is_open
    assert view.image_src == ""


def test_item_without_url_is_not_renderable():
    assert not Item(image_url="").renderable
    assert Item(image_url="https://x/c.jpg").renderable


def test_state_constructors():
    assert GalleryState.empty().message == "No image results returned from archive."
    assert GalleryState.error().status == "error"
    assert GalleryState.from_items([Item("https://x/c.jpg")], "api").status == "ok"


def test_open_needs_no_instance():
    item = Item(image_url="https://x/d.jpg", title="D")
    assert DetailView.open(item) == DetailView(item=item)
