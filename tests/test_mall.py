from mallmanager.mall import Mall
from mallmanager.stores import ClothingStore, FoodStore, Hypermarket


def test_new_mall_is_empty():
    mall = Mall()
    assert mall.stores == ()
    assert len(mall) == 0


def test_add_store_keeps_order():
    mall = Mall()
    stores = [FoodStore("A", 0, True), ClothingStore("B", 1, False), Hypermarket("C", 2, True)]
    for store in stores:
        mall.add_store(store)
    assert list(mall.stores) == stores
    assert len(mall) == 3


def test_stores_view_cannot_change_mall():
    mall = Mall()
    mall.add_store(FoodStore("A", 0, True))
    view = mall.stores
    mall.add_store(FoodStore("B", 0, True))
    assert len(view) == 1
    assert [s.name for s in mall.stores] == ["A", "B"]