# products/tests/test_products.py

from decimal import Decimal

from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from rest_framework.test import APIClient

from common.exceptions import NotFound, ValidationError
from merchants.models import Merchant
from merchants.services.auth import issue_credential
from products.models import Product
from products.services import catalog

PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\x00\x01"
    b"\x00\x00\x05\x00\x01\r\n-\xb4\x00\x00\x00\x00IEND\xaeB`\x82"
)


def _png(name="photo.png"):
    return SimpleUploadedFile(name, PNG_BYTES, content_type="image/png")


class CatalogServiceTests(TestCase):
    """
    Catalog service tests.

    GUARANTEES:
    - Required fields and numeric ranges are enforced
    - Nothing is written on a validation failure
    - Other merchants' products behave as missing
    """

    def setUp(self):
        self.merchant = Merchant.objects.create_user(
            email="owner@acme.com", password="pass", name="Acme"
        )
        self.other = Merchant.objects.create_user(
            email="other@shop.com", password="pass", name="Other"
        )

    def test_create_applies_defaults(self):
        product = catalog.create_product(self.merchant, {"name": "Widget", "price": "10"})

        self.assertEqual(product.price, Decimal("10.00"))
        self.assertEqual(product.min_quantity, 1)
        self.assertEqual(product.shipping_charges, Decimal("0.00"))
        self.assertEqual(product.gst_amount, Decimal("0.00"))
        self.assertEqual(product.image, "")

    def test_zero_price_is_allowed(self):
        product = catalog.create_product(self.merchant, {"name": "Sample", "price": 0})
        self.assertEqual(product.price, Decimal("0.00"))

    def test_missing_price_is_rejected_without_a_row(self):
        with self.assertRaises(ValidationError) as ctx:
            catalog.create_product(self.merchant, {"name": "Widget"})

        self.assertEqual(ctx.exception.field, "price")
        self.assertEqual(Product.objects.count(), 0)

    def test_invalid_numbers_name_the_field(self):
        cases = [
            ({"price": "-1"}, "price"),
            ({"price": "abc"}, "price"),
            ({"price": "NaN"}, "price"),
            ({"price": "5", "shipping_charges": "-2"}, "shipping_charges"),
            ({"price": "5", "gst_amount": "Infinity"}, "gst_amount"),
            ({"price": "5", "min_quantity": "0"}, "min_quantity"),
            ({"price": "5", "min_quantity": "two"}, "min_quantity"),
        ]

        for extra, field in cases:
            with self.subTest(field=field, extra=extra):
                with self.assertRaises(ValidationError) as ctx:
                    catalog.create_product(self.merchant, {"name": "Widget", **extra})
                self.assertEqual(ctx.exception.field, field)

        self.assertEqual(Product.objects.count(), 0)

    def test_values_beyond_column_bounds_name_the_field(self):
        cases = [
            ({"price": "5", "min_quantity": "1" + "0" * 20}, "min_quantity"),
            ({"price": "5", "name": "x" * 256}, "name"),
            ({"price": "5", "delivery_time": "d" * 256}, "delivery_time"),
        ]

        for extra, field in cases:
            with self.subTest(field=field):
                with self.assertRaises(ValidationError) as ctx:
                    catalog.create_product(self.merchant, {"name": "Widget", **extra})
                self.assertEqual(ctx.exception.field, field)

        self.assertEqual(Product.objects.count(), 0)

    def test_foreign_product_is_not_found(self):
        product = catalog.create_product(self.other, {"name": "Theirs", "price": "3"})

        with self.assertRaises(NotFound):
            catalog.get_product(self.merchant, product.id)
        with self.assertRaises(NotFound):
            catalog.update_product(self.merchant, product.id, {"name": "Mine", "price": "1"})
        with self.assertRaises(NotFound):
            catalog.delete_product(self.merchant, product.id)

        product.refresh_from_db()
        self.assertEqual(product.name, "Theirs")

    def test_update_checks_existence_before_fields(self):
        with self.assertRaises(NotFound):
            catalog.update_product(self.merchant, "not-a-uuid", {})

    def test_partial_update_keeps_other_fields(self):
        product = catalog.create_product(
            self.merchant,
            {"name": "Widget", "price": "10", "shipping_charges": "2"},
        )

        catalog.update_product(self.merchant, product.id, {"price": "12.50"}, partial=True)

        product.refresh_from_db()
        self.assertEqual(product.name, "Widget")
        self.assertEqual(product.price, Decimal("12.50"))
        self.assertEqual(product.shipping_charges, Decimal("2.00"))

    def test_list_is_scoped_to_merchant(self):
        first = catalog.create_product(self.merchant, {"name": "First", "price": "1"})
        second = catalog.create_product(self.merchant, {"name": "Second", "price": "1"})
        catalog.create_product(self.other, {"name": "Theirs", "price": "1"})

        ids = [p.id for p in catalog.list_products(self.merchant)]

        self.assertEqual(set(ids), {first.id, second.id})
        self.assertEqual(len(ids), 2)


class ProductImageTests(TestCase):
    def setUp(self):
        self.merchant = Merchant.objects.create_user(
            email="owner@acme.com", password="pass", name="Acme"
        )

    def test_image_is_stored_and_replaced(self):
        product = catalog.create_product(
            self.merchant, {"name": "Widget", "price": "1"}, image=_png()
        )
        old_ref = product.image

        self.assertTrue(old_ref.startswith("products/"))
        self.assertTrue(old_ref.endswith(".png"))
        self.assertTrue(default_storage.exists(old_ref))

        product = catalog.update_product(
            self.merchant,
            product.id,
            {},
            image=_png("new.png"),
            partial=True,
        )

        self.assertNotEqual(product.image, old_ref)
        self.assertTrue(default_storage.exists(product.image))
        self.assertFalse(default_storage.exists(old_ref))

        ref = product.image
        catalog.delete_product(self.merchant, product.id)
        self.assertFalse(default_storage.exists(ref))

    def test_non_image_upload_is_rejected(self):
        upload = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")

        with self.assertRaises(ValidationError) as ctx:
            catalog.create_product(self.merchant, {"name": "Widget", "price": "1"}, image=upload)

        self.assertEqual(ctx.exception.field, "image")
        self.assertEqual(Product.objects.count(), 0)

    def test_oversized_upload_is_rejected(self):
        with self.settings(MAX_IMAGE_UPLOAD_BYTES=10):
            with self.assertRaises(ValidationError):
                catalog.create_product(
                    self.merchant, {"name": "Widget", "price": "1"}, image=_png()
                )


class ProductAPITests(TestCase):
    """
    HTTP surface for /api/products/.
    """

    def setUp(self):
        self.client = APIClient()
        self.merchant = Merchant.objects.create_user(
            email="owner@acme.com", password="pass", name="Acme"
        )
        self.other = Merchant.objects.create_user(
            email="other@shop.com", password="pass", name="Other"
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_credential(self.merchant)}")

    def test_requires_authentication(self):
        anonymous = APIClient()
        self.assertEqual(anonymous.get("/api/products/").status_code, 401)

    def test_create_list_retrieve(self):
        response = self.client.post(
            "/api/products/",
            {"name": "Widget", "price": "10.00", "min_quantity": 5},
            format="json",
        )
        self.assertEqual(response.status_code, 201)
        product_id = response.data["id"]
        self.assertEqual(response.data["min_quantity"], 5)
        self.assertIsNone(response.data["image_url"])

        listing = self.client.get("/api/products/")
        self.assertEqual(listing.status_code, 200)
        self.assertEqual(listing.data["count"], 1)

        detail = self.client.get(f"/api/products/{product_id}/")
        self.assertEqual(detail.status_code, 200)
        self.assertEqual(detail.data["name"], "Widget")

    def test_multipart_create_with_image(self):
        response = self.client.post(
            "/api/products/",
            {"name": "Widget", "price": "10.00", "image": _png()},
            format="multipart",
        )

        self.assertEqual(response.status_code, 201)
        self.assertIn("/uploads/products/", response.data["image_url"])

    def test_missing_name_returns_400_with_field(self):
        response = self.client.post("/api/products/", {"price": "1"}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["field"], "name")

    def test_foreign_product_returns_404(self):
        theirs = Product.objects.create(merchant=self.other, name="Theirs", price=Decimal("1"))

        self.assertEqual(self.client.get(f"/api/products/{theirs.id}/").status_code, 404)
        self.assertEqual(
            self.client.put(
                f"/api/products/{theirs.id}/",
                {"name": "Mine", "price": "2"},
                format="json",
            ).status_code,
            404,
        )
        self.assertEqual(self.client.delete(f"/api/products/{theirs.id}/").status_code, 404)
        self.assertTrue(Product.objects.filter(pk=theirs.id).exists())

    def test_update_and_delete(self):
        product = Product.objects.create(merchant=self.merchant, name="Widget", price=Decimal("1"))

        response = self.client.put(
            f"/api/products/{product.id}/",
            {"name": "Widget v2", "price": "3.50", "gst_amount": "0.63"},
            format="json",
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["name"], "Widget v2")
        self.assertEqual(response.data["gst_amount"], "0.63")

        self.assertEqual(self.client.delete(f"/api/products/{product.id}/").status_code, 204)
        self.assertEqual(self.client.get(f"/api/products/{product.id}/").status_code, 404)
