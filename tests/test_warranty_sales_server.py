"""
Integration Tests for the Warranty Sales MCP Server

Tests the tool handlers directly and through an in-memory FastMCP client.
"""

import pytest
from datetime import datetime
from fastmcp import Client
from extended_warranty.config import WarrantyRulesConfig
from extended_warranty.models import Product
from extended_warranty.orchestrator import WarrantyOrchestrator
from extended_warranty.repositories import (
    InMemoryProductRepository,
    InMemoryWarrantyRepository,
    WarrantyStorageError,
)
from extended_warranty.servers.warranty_sales import (
    WarrantySalesTools,
    create_demo_orchestrator,
    create_server,
)


def fixed_clock():
    return datetime(2018, 8, 17, 9, 0)


class BrokenWarrantyRepository(InMemoryWarrantyRepository):

    def add(self, warranty):
        raise WarrantyStorageError("disk full")


@pytest.fixture
def tools():
    return WarrantySalesTools(create_demo_orchestrator(), clock=fixed_clock)


class TestWarrantySalesTools:
    """Tests for the tool handlers."""

    def test_generate_warranty(self, tools):
        result = tools.generate_warranty("C001", "Ricardo Ayala Martínez")

        assert result["status"] == "ok"
        data = result["data"]
        assert data["product_code"] == "C001"
        assert data["customer_name"] == "Ricardo Ayala Martínez"
        assert data["warranty_price"] == 156000.0
        assert data["expiration_date"] == "2019-04-09"
        assert data["request_date"] == "2018-08-17T09:00:00"

    def test_generate_twice_reports_already_insured(self, tools):
        tools.generate_warranty("C001", "Ricardo Ayala Martínez")
        result = tools.generate_warranty("C001", "Ricardo Ayala Martínez")

        assert result["status"] == "error"
        assert result["error_code"] == "ALREADY_INSURED"

    def test_generate_missing_data(self, tools):
        result = tools.generate_warranty("", "")

        assert result["status"] == "error"
        assert result["error_code"] == "MISSING_REQUIRED_DATA"

    def test_generate_unknown_product(self, tools):
        result = tools.generate_warranty("ZZZ9", "Ricardo Ayala Martínez")

        assert result["status"] == "error"
        assert result["error_code"] == "PRODUCT_NOT_FOUND"

    def test_generate_storage_error(self):
        orchestrator = WarrantyOrchestrator(
            InMemoryProductRepository([Product(code="C001", price=780000)]),
            BrokenWarrantyRepository(),
            rules=WarrantyRulesConfig()
        )
        tools = WarrantySalesTools(orchestrator, clock=fixed_clock)

        result = tools.generate_warranty("C001", "Ricardo Ayala Martínez")

        assert result["error_code"] == "STORAGE_ERROR"
        assert "disk full" in result["message"]

    def test_get_warranty(self, tools):
        assert tools.get_warranty("C001")["error_code"] == "NOT_FOUND"

        tools.generate_warranty("C001", "Ricardo Ayala Martínez")
        result = tools.get_warranty("C001")

        assert result["status"] == "ok"
        assert result["data"]["customer_name"] == "Ricardo Ayala Martínez"

    def test_quote_does_not_register(self, tools):
        result = tools.quote_warranty("F01TSA0150")

        assert result["status"] == "ok"
        assert result["data"]["percentage"] == 0.1
        assert result["data"]["warranty_price"] == 45000.0
        assert result["data"]["expiration_date"] == "2018-11-25"
        assert tools.get_warranty("F01TSA0150")["status"] == "error"

    def test_quote_unknown_product(self, tools):
        assert tools.quote_warranty("ZZZ9")["error_code"] == "PRODUCT_NOT_FOUND"


class TestWarrantySalesServer:
    """Tests through the MCP protocol."""

    @pytest.mark.asyncio
    async def test_tools_are_registered(self):
        server = create_server(clock=fixed_clock)

        async with Client(server) as client:
            tools = await client.list_tools()

        names = {tool.name for tool in tools}
        assert {"generate_warranty", "get_warranty", "quote_warranty"} <= names

    @pytest.mark.asyncio
    async def test_generate_warranty_over_mcp(self):
        server = create_server(clock=fixed_clock)

        async with Client(server) as client:
            result = await client.call_tool(
                "generate_warranty",
                {"product_code": "T2019XZ", "customer_name": "Ana Gómez"}
            )

        assert result.structured_content["status"] == "ok"
        assert result.structured_content["data"]["warranty_price"] == 250000.0
