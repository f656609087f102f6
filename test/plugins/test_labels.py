import pytest

from linked_products.events.plugins.linked_products_shortcode.labels import RELABELED_STRINGS, relabel_strings
from linked_products.storefront.i18n import TranslationCatalog


def identity(text, domain):
    return text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("You may also like…", "Related Products"),
        ("You may also like&hellip;", "Related Products"),
        ("You may be interested in…", "You May Also Need"),
        ("You may be interested in&hellip;", "You May Also Need"),
        ("Upsells", "Related Products:"),
        ("Cross-sells", "You May Also Need:"),
    ],
)
def test_known_headings_are_replaced(text, expected):
    assert relabel_strings(text, text, "storefront", translate=identity) == expected


def test_other_strings_are_returned_unchanged():
    text = "Add to cart"

    assert relabel_strings(text, text, "storefront", translate=identity) is text


def test_relabeling_is_idempotent():
    for text in RELABELED_STRINGS:
        once = relabel_strings(text, text, "storefront", translate=identity)
        assert relabel_strings(once, once, "storefront", translate=identity) == once


def test_replacement_is_translated_in_the_same_domain():
    catalog = TranslationCatalog({"shop": {"Related Products": "Prodotti correlati"}})
    calls = []

    def translate(text, domain):
        calls.append((text, domain))
        return catalog.gettext(text, domain)

    text = "You may also like…"
    assert relabel_strings(text, text, "shop", translate=translate) == "Prodotti correlati"
    assert calls == [("Related Products", "shop")]
