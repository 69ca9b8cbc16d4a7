import pytest
from django.contrib.admin.sites import AdminSite
from django.test import RequestFactory

from apps.wishlist.admin import StoredWishlistAdmin
from apps.wishlist.models import StoredWishlist

from .fixtures import BuyableProduct


@pytest.fixture
def model_admin():
    return StoredWishlistAdmin(StoredWishlist, AdminSite())


@pytest.mark.django_db
class TestStoredWishlistAdmin:
    def test_content_display(self, model_admin, wishlist):
        wishlist.add(BuyableProduct(1, "Desk lamp"), 2)
        wishlist.store("user-1")
        record = StoredWishlist.objects.get(identifier="user-1")

        html = str(model_admin.content_display(record))

        assert "Desk lamp" in html
        assert "10.00" in html
        assert model_admin.item_count_display(record) == 1

    def test_content_display_empty_and_broken(self, model_admin):
        assert model_admin.content_display(StoredWishlist(identifier="empty", content="[]")) == "-"
        assert "Unreadable" in str(model_admin.content_display(StoredWishlist(identifier="x", content="{bad")))

    def test_read_only(self, model_admin):
        request = RequestFactory().get("/admin/")
        assert model_admin.has_add_permission(request) is False
        assert model_admin.has_change_permission(request) is False
