"""
Service Tests

Tests for the booking, payment and customer business logic.  Every
test runs against both repository implementations.
"""

from home_booking.app.schemas.service import ServiceStatus, ServiceType
from home_booking.app.services.pricing import PricingPlan


# =============================================================================
# BookingService Tests
# =============================================================================

class TestBookingService:
    """Tests for BookingService."""

    def test_create_immediate(self, app, immediate_service):
        assert immediate_service.id == 1
        assert immediate_service.status == ServiceStatus.PENDING
        assert immediate_service.type is ServiceType.IMMEDIATE
        assert immediate_service.price is None
        assert immediate_service.booking_date == "2025-06-15"
        assert immediate_service.booking_time == "10:30:00"
        assert immediate_service.work_date is None
        assert app.service_repo.find_by_id(1) == immediate_service

    def test_create_scheduling(self, app, customer):
        service = app.booking_service.create_scheduling(
            "Intermediate", customer.locality, customer.id, customer.gender,
            customer.address, ["Mopping", "Sweeping", "Ironing"], "F",
            "2025-07-01", "09:00:00",
        )

        assert service.type is ServiceType.SCHEDULING
        assert service.work_date == "2025-07-01"
        assert service.work_start_time == "09:00:00"
        assert service.work_end_time is None
        assert app.service_repo.find_by_id(service.id).gender_pref == "F"

    def test_ids_increase(self, app, customer, immediate_service):
        second = app.booking_service.create_immediate(
            "Basic", customer.locality, customer.id, customer.gender,
            customer.address, ["Mopping"], "NP",
        )
        assert second.id == immediate_service.id + 1

    def test_no_input_validation(self, app):
        service = app.booking_service.create_immediate("Whatever", "", "ghost", "", "", [], "NP")
        assert service.plan == "Whatever"
        assert service.requested_services == []

    def test_attach_price_keeps_external_fields(self, app, immediate_service):
        # The worker/admin subsystem assigns the request meanwhile.
        assigned = immediate_service.model_copy(update={
            "status": ServiceStatus.ASSIGNED.value,
            "work_date": "2025-06-15",
            "work_start_time": "11:00:00",
            "assigned_worker_ids": ["w7"],
        })
        app.service_repo.save(assigned)

        updated = app.booking_service.attach_price(immediate_service.id, 600.0)

        stored = app.service_repo.find_by_id(immediate_service.id)
        assert updated == stored
        assert stored.price == 600.0
        assert stored.status == ServiceStatus.ASSIGNED
        assert stored.work_start_time == "11:00:00"
        assert stored.assigned_worker_ids == ["w7"]

    def test_attach_price_missing_service(self, app):
        assert app.booking_service.attach_price(99, 100.0) is None

    def test_rebook(self, app, customer, immediate_service):
        moved = customer.model_copy(update={"locality": "Patamata", "address": "9 New St"})

        immediate = app.booking_service.rebook(immediate_service, moved)
        scheduled = app.booking_service.rebook(immediate_service, moved, "2025-08-01", "08:00:00")

        assert immediate.type is ServiceType.IMMEDIATE
        assert immediate.requested_services == ["Window Cleaning"]
        assert immediate.locality == "Patamata"
        assert immediate.address == "9 New St"
        assert scheduled.type is ServiceType.SCHEDULING
        assert scheduled.work_date == "2025-08-01"
        assert [immediate.id, scheduled.id] == [2, 3]


# =============================================================================
# PaymentService Tests
# =============================================================================

class TestPaymentService:
    """Tests for PaymentService."""

    def test_generate_payment(self, app, immediate_service):
        payment = app.payment_service.generate_payment(immediate_service, [1])

        assert payment.service_id == immediate_service.id
        assert payment.amount_due == 600
        assert payment.paid is False
        assert app.payment_service.get_payment(immediate_service.id) == payment

    def test_generate_payment_applies_plan(self, app, immediate_service):
        premium = immediate_service.model_copy(update={"plan": "Premium"})
        assert app.payment_service.generate_payment(premium, [1, 2, 3, 4, 5]).amount_due == 1600.0

    def test_generate_payment_unknown_plan_full_price(self, app, immediate_service):
        odd = immediate_service.model_copy(update={"plan": "Platinum"})
        assert app.payment_service.generate_payment(odd, [1, 2]).amount_due == 900

    def test_generate_payment_overwrites_previous(self, app, immediate_service):
        app.payment_service.generate_payment(immediate_service, [1])
        app.payment_service.process_payment(immediate_service.id, 600)
        payment = app.payment_service.generate_payment(immediate_service, [1, 2])

        assert payment.amount_due == 900
        assert app.payment_service.get_payment(immediate_service.id).paid is False

    def test_process_payment_exact_amount(self, app, immediate_service):
        app.payment_service.generate_payment(immediate_service, [1])

        assert app.payment_service.process_payment(immediate_service.id, 599.99) is False
        assert app.payment_service.get_payment(immediate_service.id).paid is False
        assert app.payment_service.process_payment(immediate_service.id, 600) is True
        assert app.payment_service.get_payment(immediate_service.id).paid is True

    def test_process_payment_without_bill(self, app):
        assert app.payment_service.process_payment(5, 100) is False

    def test_get_payment_missing(self, app):
        assert app.payment_service.get_payment(5) is None

    def test_settle_attaches_price(self, app, immediate_service):
        app.payment_service.generate_payment(immediate_service, [1])

        assert app.payment_service.settle(immediate_service, 600, app.booking_service)
        assert app.service_repo.find_by_id(immediate_service.id).price == 600

    def test_settle_wrong_amount_leaves_service(self, app, immediate_service):
        app.payment_service.generate_payment(immediate_service, [1])

        assert not app.payment_service.settle(immediate_service, 500, app.booking_service)
        assert app.service_repo.find_by_id(immediate_service.id).price is None


# =============================================================================
# CustomerService Tests
# =============================================================================

class TestCustomerService:
    """Tests for CustomerService."""

    def test_register_once(self, app, customer):
        assert app.customer_service.register_customer(customer) is True
        again = customer.model_copy(update={"name": "Impostor"})

        assert app.customer_service.register_customer(again) is False
        assert app.customer_repo.find_by_id(customer.id).name == "Test User"

    def test_id_exists(self, app, customer):
        assert not app.customer_service.id_exists(customer.id)
        app.customer_service.register_customer(customer)
        assert app.customer_service.id_exists(customer.id)

    def test_update_customer(self, app, customer):
        app.customer_service.register_customer(customer)
        app.customer_service.update_customer(customer.model_copy(update={"password": "newpass"}))

        assert app.customer_service.authenticate(customer.id, "newpass") is not None
        assert app.customer_service.authenticate(customer.id, "pass123") is None

    def test_authenticate(self, app, customer):
        app.customer_service.register_customer(customer)

        assert app.customer_service.authenticate("cust001", "pass123") == customer
        assert app.customer_service.authenticate("cust001", "PASS123") is None
        assert app.customer_service.authenticate("nobody", "pass123") is None

    def test_booking_views(self, app, customer, immediate_service):
        for service_id, status in ((2, 1), (3, 2), (4, -1)):
            app.service_repo.save(immediate_service.model_copy(update={"id": service_id, "status": status}))
        app.service_repo.save(immediate_service.model_copy(update={"id": 5, "customer_id": "other"}))

        assert [s.id for s in app.customer_service.view_customer_bookings(customer.id)] == [1, 2, 3, 4]
        assert [s.id for s in app.customer_service.current_bookings(customer.id)] == [1, 2]
        assert [s.id for s in app.customer_service.completed_bookings(customer.id)] == [3]
        assert [s.id for s in app.customer_service.rejected_bookings(customer.id)] == [4]


# =============================================================================
# Workflow
# =============================================================================

def test_booking_workflow(app, customer):
    """Register, book, bill and pay in one pass."""
    assert app.customer_service.register_customer(customer)
    logged_in = app.customer_service.authenticate(customer.id, customer.password)

    selection = app.validator.select_works(PricingPlan.INTERMEDIATE, [1, 2, 3])
    service = app.booking_service.create_immediate(
        "Intermediate", logged_in.locality, logged_in.id, logged_in.gender,
        logged_in.address, selection.names, "NP",
    )
    payment = app.payment_service.generate_payment(service, selection.work_ids)
    assert payment.amount_due == 990.0

    assert app.payment_service.settle(service, 990.0, app.booking_service)
    [booked] = app.customer_service.current_bookings(customer.id)
    assert booked.requested_services == ["Window Cleaning", "Mopping", "Sweeping"]
    assert booked.price == 990.0
