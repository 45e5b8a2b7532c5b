"""Tests for tool registration on the FastMCP server."""

import httpx
import pytest
from fastmcp import Client

from iss_tools import schedule_tool, weather_tool
from iss_tools.mcp_server import SERVER_NAME, create_server


@pytest.fixture
def server(settings, schedule_csv):
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, json={"answer_box": {
            "temperature": "70", "wind": "4 mph", "precipitation": "0%",
        }})
    )
    return create_server(settings, schedule_path=schedule_csv, transport=transport)


class TestRegistration:
    """Test what the server advertises."""

    @pytest.mark.asyncio
    async def test_registers_both_tools(self, server):
        tools = await server.get_tools()

        assert server.name == SERVER_NAME
        assert set(tools) == {schedule_tool.TOOL_NAME, weather_tool.TOOL_NAME}

    @pytest.mark.asyncio
    async def test_schedule_descriptor(self, server):
        tool = (await server.get_tools())[schedule_tool.TOOL_NAME]

        assert tool.title == "Get ISS Crew Schedule"
        assert tool.description == schedule_tool.TOOL_DESCRIPTION
        assert set(tool.parameters["properties"]) == {"day", "name"}
        assert not tool.parameters.get("required")
        assert tool.output_schema == schedule_tool.SCHEDULE_OUTPUT_SCHEMA

    @pytest.mark.asyncio
    async def test_weather_descriptor(self, server):
        tool = (await server.get_tools())[weather_tool.TOOL_NAME]

        assert tool.title == "Weather Query Tool"
        assert set(tool.parameters["required"]) == {"location_name", "date_YYYYMMDD"}
        assert tool.output_schema == weather_tool.WEATHER_OUTPUT_SCHEMA

    def test_output_schemas_declare_error_branch(self):
        for schema in (schedule_tool.SCHEDULE_OUTPUT_SCHEMA, weather_tool.WEATHER_OUTPUT_SCHEMA):
            assert schema["type"] == "object"
            assert any(branch.get("required") == ["error"] for branch in schema["oneOf"])


class TestInMemoryCalls:
    """Call tools through an MCP client connected in memory."""

    @pytest.mark.asyncio
    async def test_schedule_call(self, server):
        async with Client(server) as client:
            result = await client.call_tool_mcp(schedule_tool.TOOL_NAME, {"day": "monday"})

        assert not result.isError
        assert [r["Crew Member"] for r in result.structuredContent["results"]] == [
            "Jane Doe",
            "Alexei Petrov",
        ]
        assert result.content[0].text.startswith("🛰️")

    @pytest.mark.asyncio
    async def test_weather_call_parses_date(self, server):
        async with Client(server) as client:
            result = await client.call_tool_mcp(
                weather_tool.TOOL_NAME,
                {"location_name": "Houston", "date_YYYYMMDD": "2025-10-06"},
            )

        assert not result.isError
        assert result.structuredContent == {
            "temperature": 70.0,
            "winds": "4 mph",
            "precipitation": "0%",
        }

    @pytest.mark.asyncio
    async def test_missing_required_input_is_rejected(self, server):
        async with Client(server) as client:
            result = await client.call_tool_mcp(weather_tool.TOOL_NAME, {"location_name": "Houston"})

        assert result.isError
