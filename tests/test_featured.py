import json

from vapas.featured import serialize_featured

from .conftest import make_banner


def test_empty_envelope():
    assert serialize_featured([]) == {
        "class": "FeaturedBannersView",
        "itemSize": "{263, 148}",
        "itemCornerRadius": 10,
        "banners": [],
    }


def test_banners_keep_order_and_camel_case():
    banners = [
        make_banner(title="Second", package="com.b", hide_shadow=True),
        make_banner(title="First", package="com.a"),
        make_banner(title="First", package="com.a"),
    ]
    envelope = serialize_featured(banners)
    assert [b["title"] for b in envelope["banners"]] == ["Second", "First", "First"]
    assert envelope["banners"][0] == {
        "url": "https://repo.example/banners/foo.png",
        "title": "Second",
        "package": "com.b",
        "hideShadow": True,
    }
    assert envelope["itemCornerRadius"] == 10


def test_envelope_is_json_serializable():
    text = json.dumps(serialize_featured([make_banner()]))
    assert '"hideShadow": false' in text
