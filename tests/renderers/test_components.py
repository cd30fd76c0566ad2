from scenariopilot.renderers.components import bullets, checklist, slugify, table, unique_slug


def test_bullets() -> None:
    assert bullets(["a", "b"]) == "- a\n- b"
    assert bullets([]) == "- (none)"
    assert bullets(["a"], marker="*") == "* a"


def test_checklist() -> None:
    assert checklist(["Write", "Ship"]) == "- [ ] Write\n- [ ] Ship"


def test_table_escapes_pipes() -> None:
    assert table(["Name", "N"], [["a|b", "1"]]) == "| Name | N |\n|------|---|\n| a\\|b | 1 |"


def test_slugify() -> None:
    assert slugify("Shopping Cart: Add items!") == "shopping-cart-add-items"
    assert slugify("***") == "untitled"


def test_unique_slug_suffixes_collisions() -> None:
    used: set[str] = set()

    assert [unique_slug("Cart", used), unique_slug("cart", used), unique_slug("CART!", used)] == [
        "cart",
        "cart-2",
        "cart-3",
    ]
