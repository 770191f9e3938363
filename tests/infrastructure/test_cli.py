"""End-to-end tests for the click CLI with fake repositories wired in."""

import pytest
from click.testing import CliRunner

from orderdesk.domain.model.line_items import OrderLine, PersistedLineId
from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money, Quantity
from orderdesk.infrastructure.cli import main, order_commands, product_commands
from orderdesk.infrastructure.cli.main import cli
from tests.fakes import FakeOrderRepository, FakeProductRepository


@pytest.fixture
def repos(monkeypatch):
    products = [
        Product(id=1, name="Widget", unit_price=Money.of("9.50")),
        Product(id=2, name="Gadget", unit_price=Money.of("25.00")),
    ]
    order_repo = FakeOrderRepository(
        orders=[
            Order(id=7, order_number="PO-7", status=OrderStatus.PENDING,
                  date="2026-10-01T09:30:00"),
            Order(id=8, order_number="PO-8", status=OrderStatus.COMPLETED,
                  date="2026-10-02T09:30:00"),
        ],
        lines={
            7: [
                OrderLine(PersistedLineId(70), 1, "Widget", Money.of("9.50"), Quantity(1)),
                OrderLine(PersistedLineId(71), 2, "Gadget", Money.of("25.00"), Quantity(2)),
            ],
        },
        products=products,
    )
    product_repo = FakeProductRepository(products)
    monkeypatch.setattr(order_commands, "order_repository", lambda settings: order_repo)
    monkeypatch.setattr(order_commands, "product_repository", lambda settings: product_repo)
    monkeypatch.setattr(product_commands, "product_repository", lambda settings: product_repo)
    return order_repo, product_repo


@pytest.fixture
def runner():
    return CliRunner()


class TestOrderList:

    def test_default_view_is_order_list(self, runner, repos):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0, result.output
        assert "PO-7" in result.output
        assert "$59.50" in result.output
        assert "locked" in result.output

    def test_load_failure(self, runner, repos):
        repos[0].fail_on("list_all")
        result = runner.invoke(cli, ["order", "list"])
        assert result.exit_code == 1
        assert "Error loading orders" in result.output

    def test_sessions_closed_when_command_ends(self, runner, repos, monkeypatch):
        closed = []
        monkeypatch.setattr(main, "close_clients", lambda: closed.append(True))
        result = runner.invoke(cli, ["order", "list"])
        assert result.exit_code == 0, result.output
        assert closed == [True]


class TestOrderCreate:

    def test_creates_and_returns_to_list(self, runner, repos):
        order_repo, _ = repos
        result = runner.invoke(cli, ["order", "create", "--number", "PO-100", "--item", "1:3"])

        assert result.exit_code == 0, result.output
        assert "Final Price: $28.50" in result.output
        assert "Order #100 'PO-100' created." in result.output
        assert [c for c in order_repo.calls if c[0] in ("create", "add_line")] == [
            ("create", "PO-100"),
            ("add_line", 100, 1, 3),
        ]
        # Navigated back to the list, which now holds the new order.
        assert result.output.count("PO-100") >= 2

    def test_multiple_items(self, runner, repos):
        order_repo, _ = repos
        result = runner.invoke(
            cli, ["order", "create", "--number", "PO-1", "--item", "1:1,2:2", "--item", "1:4"]
        )
        assert result.exit_code == 0, result.output
        assert [c[2:] for c in order_repo.calls_to("add_line")] == [(1, 1), (2, 2), (1, 4)]

    def test_bad_item_format(self, runner, repos):
        result = runner.invoke(cli, ["order", "create", "--number", "PO-1", "--item", "Widget"])
        assert result.exit_code == 2
        assert "Expected 'ProductId:Quantity'" in result.output

    def test_unknown_product(self, runner, repos):
        order_repo, _ = repos
        result = runner.invoke(cli, ["order", "create", "--number", "PO-1", "--item", "99:1"])
        assert result.exit_code == 1
        assert "Select product and quantity > 0" in result.output
        assert order_repo.calls_to("create") == []

    def test_catalog_load_failure(self, runner, repos):
        repos[1].fail_on("list_all")
        result = runner.invoke(cli, ["order", "create", "--number", "PO-1", "--item", "1:1"])
        assert result.exit_code == 1
        assert "Error loading products" in result.output

    def test_save_failure(self, runner, repos):
        repos[0].fail_on("add_line")
        result = runner.invoke(cli, ["order", "create", "--number", "PO-1", "--item", "1:1"])
        assert result.exit_code == 1
        assert "Error saving changes" in result.output


class TestOrderEdit:

    def test_show(self, runner, repos):
        result = runner.invoke(cli, ["order", "show", "--id", "7"])
        assert result.exit_code == 0, result.output
        assert "Edit Order" in result.output
        assert "# Products:  3" in result.output

    def test_edit_resends_every_line(self, runner, repos):
        order_repo, _ = repos
        result = runner.invoke(cli, ["order", "edit", "--id", "7", "--set", "71:5"])

        assert result.exit_code == 0, result.output
        assert "Order #7 saved." in result.output
        assert [c[2:] for c in order_repo.calls_to("update_line")] == [
            (PersistedLineId(70), 1),
            (PersistedLineId(71), 5),
        ]

    def test_completed_order_cannot_be_edited(self, runner, repos):
        order_repo, _ = repos
        result = runner.invoke(cli, ["order", "edit", "--id", "8", "--set", "80:1"])
        assert result.exit_code == 1
        assert "is completed" in result.output
        assert order_repo.calls_to("update_line") == []

    def test_unknown_line(self, runner, repos):
        result = runner.invoke(cli, ["order", "edit", "--id", "7", "--set", "99:1"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestOrderActions:

    def test_status_change(self, runner, repos):
        order_repo, _ = repos
        result = runner.invoke(cli, ["order", "status", "--id", "7", "--status", "in-progress"])
        assert result.exit_code == 0, result.output
        assert "Order #7 is now In Progress." in result.output
        assert order_repo.calls_to("update_status") == [
            ("update_status", 7, OrderStatus.IN_PROGRESS),
        ]

    def test_status_change_on_completed_refused(self, runner, repos):
        result = runner.invoke(cli, ["order", "status", "--id", "8", "--status", "1"])
        assert result.exit_code == 1
        assert repos[0].calls_to("update_status") == []

    def test_delete_confirmed(self, runner, repos):
        result = runner.invoke(cli, ["order", "delete", "--id", "7"], input="y\n")
        assert result.exit_code == 0, result.output
        assert repos[0].calls_to("delete") == [("delete", 7)]

    def test_delete_declined(self, runner, repos):
        result = runner.invoke(cli, ["order", "delete", "--id", "7"], input="n\n")
        assert result.exit_code == 1
        assert repos[0].calls_to("delete") == []

    def test_delete_completed_refused(self, runner, repos):
        result = runner.invoke(cli, ["order", "delete", "--id", "8", "--yes"])
        assert result.exit_code == 1
        assert "is completed" in result.output


class TestProducts:

    def test_list(self, runner, repos):
        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0, result.output
        assert "Widget" in result.output
        assert "$25.00" in result.output

    def test_add(self, runner, repos):
        _, product_repo = repos
        result = runner.invoke(cli, ["product", "add", "--name", "Sprocket", "--price", "3.75"])
        assert result.exit_code == 0, result.output
        assert "Product 'Sprocket' added" in result.output
        assert product_repo.calls_to("create") == [("create", "Sprocket", Money.of("3.75"))]

    def test_add_invalid_price(self, runner, repos):
        result = runner.invoke(cli, ["product", "add", "--name", "Sprocket", "--price", "0"])
        assert result.exit_code == 1
        assert "Name and unit price are required" in result.output

    def test_update_keeps_unset_fields(self, runner, repos):
        _, product_repo = repos
        result = runner.invoke(cli, ["product", "update", "--id", "1", "--price", "11"])
        assert result.exit_code == 0, result.output
        assert product_repo.calls_to("update") == [("update", 1, "Widget", Money.of("11"))]

    def test_update_unknown(self, runner, repos):
        result = runner.invoke(cli, ["product", "update", "--id", "42", "--name", "X"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_delete(self, runner, repos):
        _, product_repo = repos
        result = runner.invoke(cli, ["product", "delete", "--id", "2", "--yes"])
        assert result.exit_code == 0, result.output
        assert product_repo.calls_to("delete") == [("delete", 2)]
        assert "Gadget" not in result.output.split("deleted.")[-1]
