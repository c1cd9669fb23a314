# quotes/tests/test_quote_workflow.py

from decimal import Decimal
from unittest import mock

from django.test import TestCase

from common.exceptions import NotFound, ValidationError
from merchants.models import Merchant
from products.models import Product
from quotes.models import QuoteRequest, QuoteRequestItem
from quotes.services import quote_workflow
from quotes.services.stats import dashboard_stats
from quotes.services.status import QUOTE_STATUSES, can_transition

CUSTOMER = {"name": "Jane Doe", "email": "jane@example.com"}


class QuoteWorkflowTests(TestCase):
    """
    Quote workflow tests.

    GUARANTEES:
    - Submission is all-or-nothing
    - A request never exists without items
    - Totals are computed from live product pricing
    - Status updates are idempotent overwrites
    """

    def setUp(self):
        self.merchant = Merchant.objects.create_user(
            email="owner@acme.com", password="pass", name="Acme"
        )
        self.other = Merchant.objects.create_user(
            email="other@shop.com", password="pass", name="Other"
        )
        self.p1 = Product.objects.create(
            merchant=self.merchant,
            name="Widget",
            price=Decimal("10.00"),
            min_quantity=1,
            shipping_charges=Decimal("2.00"),
            gst_amount=Decimal("1.00"),
        )
        self.p2 = Product.objects.create(
            merchant=self.merchant, name="Gadget", price=Decimal("5.00")
        )
        self.foreign = Product.objects.create(
            merchant=self.other, name="Theirs", price=Decimal("1.00")
        )

    def _submit(self, items, merchant=None, customer=None):
        return quote_workflow.submit_quote_request(
            (merchant or self.merchant).id,
            customer or CUSTOMER,
            items,
        )

    # --------------------------------------------------
    # Submission
    # --------------------------------------------------

    def test_submit_creates_pending_request_with_items(self):
        quote_request = self._submit(
            [
                {"product_id": str(self.p1.id), "quantity": 2},
                {"product_id": str(self.p2.id), "quantity": 1},
            ]
        )

        self.assertEqual(quote_request.status, QuoteRequest.STATUS_PENDING)
        self.assertEqual(quote_request.items.count(), 2)
        self.assertEqual(
            set(quote_request.items.values_list("product_name", flat=True)),
            {"Widget", "Gadget"},
        )

    def test_foreign_product_rolls_back_everything(self):
        with self.assertRaises(ValidationError):
            self._submit(
                [
                    {"product_id": str(self.p1.id), "quantity": 2},
                    {"product_id": str(self.foreign.id), "quantity": 1},
                ]
            )

        self.assertEqual(QuoteRequest.objects.count(), 0)
        self.assertEqual(QuoteRequestItem.objects.count(), 0)

    def test_unknown_product_rolls_back_everything(self):
        with self.assertRaises(ValidationError):
            self._submit(
                [
                    {"product_id": str(self.p1.id), "quantity": 1},
                    {"product_id": "not-a-uuid", "quantity": 1},
                ]
            )

        self.assertEqual(QuoteRequest.objects.count(), 0)

    def test_zero_quantity_only_is_rejected_without_a_row(self):
        with self.assertRaises(ValidationError):
            self._submit([{"product_id": str(self.p1.id), "quantity": 0}])

        self.assertEqual(QuoteRequest.objects.count(), 0)

    def test_non_positive_quantities_are_skipped(self):
        quote_request = self._submit(
            [
                {"product_id": str(self.p1.id), "quantity": 3},
                {"product_id": str(self.p2.id), "quantity": -1},
                {"product_id": str(self.foreign.id), "quantity": 0},
            ]
        )

        self.assertEqual(quote_request.items.count(), 1)

    def test_oversized_quantity_is_rejected_without_a_row(self):
        with self.assertRaises(ValidationError) as ctx:
            self._submit(
                [
                    {"product_id": str(self.p1.id), "quantity": 1},
                    {"product_id": str(self.p2.id), "quantity": 10**20},
                ]
            )

        self.assertEqual(ctx.exception.field, "items")
        self.assertEqual(QuoteRequest.objects.count(), 0)
        self.assertEqual(QuoteRequestItem.objects.count(), 0)

    def test_quantity_at_column_bound_is_accepted(self):
        quote_request = self._submit(
            [{"product_id": str(self.p2.id), "quantity": quote_workflow.MAX_QUANTITY}]
        )

        self.assertEqual(quote_request.items.get().quantity, quote_workflow.MAX_QUANTITY)

    def test_overlong_customer_fields_name_the_field(self):
        item = [{"product_id": str(self.p1.id), "quantity": 1}]
        cases = [
            ({**CUSTOMER, "name": "x" * 256}, "customer_name"),
            ({**CUSTOMER, "phone": "1" * 41}, "customer_phone"),
        ]

        for customer, field in cases:
            with self.subTest(field=field):
                with self.assertRaises(ValidationError) as ctx:
                    self._submit(item, customer=customer)
                self.assertEqual(ctx.exception.field, field)

        self.assertEqual(QuoteRequest.objects.count(), 0)

    def test_preconditions(self):
        item = [{"product_id": str(self.p1.id), "quantity": 1}]

        with self.assertRaises(NotFound):
            quote_workflow.submit_quote_request(
                "00000000-0000-0000-0000-000000000000", CUSTOMER, item
            )
        with self.assertRaises(ValidationError):
            self._submit(item, customer={"name": "", "email": "jane@example.com"})
        with self.assertRaises(ValidationError):
            self._submit(item, customer={"name": "Jane", "email": ""})
        with self.assertRaises(ValidationError):
            self._submit([])

        self.assertEqual(QuoteRequest.objects.count(), 0)

    # --------------------------------------------------
    # Detail + pricing
    # --------------------------------------------------

    def test_subtotal_uses_flat_shipping_and_gst(self):
        quote_request = self._submit([{"product_id": str(self.p1.id), "quantity": 3}])

        detail = quote_workflow.get_quote_request_detail(self.merchant, quote_request.id)

        self.assertEqual(len(detail.lines), 1)
        self.assertEqual(detail.lines[0].subtotal, Decimal("33.00"))
        self.assertEqual(detail.total, Decimal("33.00"))

    def test_pricing_is_read_live(self):
        quote_request = self._submit([{"product_id": str(self.p2.id), "quantity": 2}])

        self.p2.price = Decimal("7.50")
        self.p2.save()

        detail = quote_workflow.get_quote_request_detail(self.merchant, quote_request.id)
        self.assertEqual(detail.total, Decimal("15.00"))

    def test_deleted_product_leaves_readable_item(self):
        quote_request = self._submit(
            [
                {"product_id": str(self.p1.id), "quantity": 3},
                {"product_id": str(self.p2.id), "quantity": 1},
            ]
        )
        self.p2.delete()

        detail = quote_workflow.get_quote_request_detail(self.merchant, quote_request.id)
        orphan = [line for line in detail.lines if line.item.product_id is None]

        self.assertEqual(len(orphan), 1)
        self.assertEqual(orphan[0].item.product_name, "Gadget")
        self.assertIsNone(orphan[0].subtotal)
        self.assertEqual(detail.total, Decimal("33.00"))

    def test_foreign_request_is_not_found(self):
        quote_request = self._submit([{"product_id": str(self.p1.id), "quantity": 1}])

        with self.assertRaises(NotFound):
            quote_workflow.get_quote_request_detail(self.other, quote_request.id)
        with self.assertRaises(NotFound):
            quote_workflow.update_status(self.other, quote_request.id, "processed")

    # --------------------------------------------------
    # Listing + status
    # --------------------------------------------------

    def test_list_filters(self):
        first = self._submit([{"product_id": str(self.p1.id), "quantity": 1}])
        self._submit([{"product_id": str(self.p1.id), "quantity": 1}])
        quote_workflow.update_status(self.merchant, first.id, "rejected")

        self.assertEqual(quote_workflow.list_quote_requests(self.merchant).count(), 2)
        self.assertEqual(quote_workflow.list_quote_requests(self.merchant, "all").count(), 2)
        self.assertEqual(quote_workflow.list_quote_requests(self.merchant, "").count(), 2)
        self.assertEqual(
            list(quote_workflow.list_quote_requests(self.merchant, "rejected")),
            [first],
        )
        self.assertEqual(quote_workflow.list_quote_requests(self.other).count(), 0)

        with self.assertRaises(ValidationError):
            quote_workflow.list_quote_requests(self.merchant, "archived")

    def test_update_status_is_idempotent(self):
        quote_request = self._submit([{"product_id": str(self.p1.id), "quantity": 1}])

        quote_workflow.update_status(self.merchant, quote_request.id, "processed")
        quote_workflow.update_status(self.merchant, quote_request.id, "processed")

        quote_request.refresh_from_db()
        self.assertEqual(quote_request.status, "processed")

    def test_invalid_status_is_rejected_before_lookup(self):
        with self.assertRaises(ValidationError):
            quote_workflow.update_status(self.merchant, "missing", "done")

    def test_update_status_refuses_a_disallowed_transition(self):
        quote_request = self._submit([{"product_id": str(self.p1.id), "quantity": 1}])

        with mock.patch.object(quote_workflow, "can_transition", return_value=False):
            with self.assertRaises(ValidationError) as ctx:
                quote_workflow.update_status(self.merchant, quote_request.id, "processed")

        self.assertEqual(ctx.exception.field, "status")
        quote_request.refresh_from_db()
        self.assertEqual(quote_request.status, "pending")

    def test_every_transition_is_allowed(self):
        for current in QUOTE_STATUSES:
            for target in QUOTE_STATUSES:
                self.assertTrue(can_transition(current, target))

        self.assertFalse(can_transition("pending", "archived"))

    def test_dashboard_stats(self):
        a = self._submit([{"product_id": str(self.p1.id), "quantity": 1}])
        b = self._submit([{"product_id": str(self.p1.id), "quantity": 1}])
        self._submit([{"product_id": str(self.p1.id), "quantity": 1}])
        quote_workflow.update_status(self.merchant, a.id, "processed")
        quote_workflow.update_status(self.merchant, b.id, "rejected")

        self.assertEqual(
            dashboard_stats(self.merchant),
            {
                "total_products": 2,
                "total_requests": 3,
                "pending_requests": 1,
                "processed_requests": 1,
                "rejected_requests": 1,
            },
        )
