# quotes/tests/test_quote_api.py

from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from merchants.models import Merchant
from merchants.services.auth import issue_credential
from products.models import Product
from quotes.models import QuoteRequest


class QuoteRequestAPITests(TestCase):
    """
    HTTP surface for /api/quote-requests/ and /api/dashboard/stats/.
    """

    def setUp(self):
        self.public = APIClient()
        self.client = APIClient()

        self.merchant = Merchant.objects.create_user(
            email="owner@acme.com", password="pass", name="Acme"
        )
        self.other = Merchant.objects.create_user(
            email="other@shop.com", password="pass", name="Other"
        )
        self.product = Product.objects.create(
            merchant=self.merchant,
            name="Widget",
            price=Decimal("10.00"),
            shipping_charges=Decimal("2.00"),
            gst_amount=Decimal("1.00"),
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_credential(self.merchant)}")

    def _payload(self, **overrides):
        payload = {
            "merchant_id": str(self.merchant.id),
            "customer_name": "Jane Doe",
            "customer_email": "jane@example.com",
            "customer_phone": "555-0100",
            "message": "Please quote",
            "items": [{"product_id": str(self.product.id), "quantity": 3}],
        }
        payload.update(overrides)
        return payload

    def test_public_submit_and_merchant_detail(self):
        response = self.public.post("/api/quote-requests/", self._payload(), format="json")

        self.assertEqual(response.status_code, 201)
        request_id = response.data["request_id"]

        detail = self.client.get(f"/api/quote-requests/{request_id}/")
        self.assertEqual(detail.status_code, 200)
        self.assertEqual(detail.data["request"]["status"], "pending")
        self.assertEqual(detail.data["items"][0]["subtotal"], "33.00")
        self.assertEqual(detail.data["items"][0]["product"]["name"], "Widget")
        self.assertEqual(detail.data["total"], "33.00")

    def test_public_submit_ignores_bad_token(self):
        self.public.credentials(HTTP_AUTHORIZATION="Bearer garbage")

        response = self.public.post("/api/quote-requests/", self._payload(), format="json")

        self.assertEqual(response.status_code, 201)

    def test_submit_with_foreign_product_returns_400_and_no_row(self):
        theirs = Product.objects.create(merchant=self.other, name="Theirs", price=Decimal("1"))
        payload = self._payload(
            items=[
                {"product_id": str(self.product.id), "quantity": 1},
                {"product_id": str(theirs.id), "quantity": 1},
            ]
        )

        response = self.public.post("/api/quote-requests/", payload, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertFalse(QuoteRequest.objects.exists())

    def test_submit_with_oversized_quantity_returns_400_and_no_row(self):
        payload = self._payload(items=[{"product_id": str(self.product.id), "quantity": 10**20}])

        response = self.public.post("/api/quote-requests/", payload, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertFalse(QuoteRequest.objects.exists())

    def test_submit_with_overlong_phone_returns_400_and_no_row(self):
        response = self.public.post(
            "/api/quote-requests/", self._payload(customer_phone="1" * 41), format="json"
        )

        self.assertEqual(response.status_code, 400)
        self.assertFalse(QuoteRequest.objects.exists())

    def test_submit_to_unknown_merchant_returns_404(self):
        response = self.public.post(
            "/api/quote-requests/",
            self._payload(merchant_id="00000000-0000-0000-0000-000000000000"),
            format="json",
        )

        self.assertEqual(response.status_code, 404)

    def test_list_requires_authentication(self):
        self.assertEqual(self.public.get("/api/quote-requests/").status_code, 401)

    def test_list_status_filter(self):
        self.public.post("/api/quote-requests/", self._payload(), format="json")

        self.assertEqual(self.client.get("/api/quote-requests/").data["count"], 1)
        self.assertEqual(
            self.client.get("/api/quote-requests/", {"status": "processed"}).data["count"],
            0,
        )
        self.assertEqual(
            self.client.get("/api/quote-requests/", {"status": "bogus"}).status_code,
            400,
        )

    def test_update_status(self):
        self.public.post("/api/quote-requests/", self._payload(), format="json")
        quote_request = QuoteRequest.objects.get()

        for _ in range(2):
            response = self.client.put(
                f"/api/quote-requests/{quote_request.id}/",
                {"status": "processed"},
                format="json",
            )
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.data["request"]["status"], "processed")

        bad = self.client.patch(
            f"/api/quote-requests/{quote_request.id}/",
            {"status": "done"},
            format="json",
        )
        self.assertEqual(bad.status_code, 400)

    def test_foreign_request_returns_404(self):
        self.public.post("/api/quote-requests/", self._payload(), format="json")
        quote_request = QuoteRequest.objects.get()

        outsider = APIClient()
        outsider.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_credential(self.other)}")

        self.assertEqual(outsider.get(f"/api/quote-requests/{quote_request.id}/").status_code, 404)
        self.assertEqual(
            outsider.put(
                f"/api/quote-requests/{quote_request.id}/",
                {"status": "rejected"},
                format="json",
            ).status_code,
            404,
        )

    def test_dashboard_stats(self):
        self.public.post("/api/quote-requests/", self._payload(), format="json")

        response = self.client.get("/api/dashboard/stats/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["total_products"], 1)
        self.assertEqual(response.data["total_requests"], 1)
        self.assertEqual(response.data["pending_requests"], 1)
