"""
Unit Tests for the console view
Tests for: weekly chart table, resource listing
"""
from carbon_tracker.domain import Resource
from carbon_tracker.service import ChartRow, WeeklyLogStore
from carbon_tracker.view import CHART_BORDER, CHART_HEADER, ConsoleView


class TestWeeklyChart:
    """Test chart rendering"""

    def test_table_layout(self):
        store = WeeklyLogStore({"alice": [3.0, 0.0, 0.0, 0.0, 0.0, 0.0, 12.5]})
        lines = ConsoleView()._build_chart(store.chart_rows("alice", 100))

        assert lines[0] == CHART_BORDER
        assert lines[1] == CHART_HEADER
        assert lines[2] == CHART_BORDER
        assert lines[-1] == CHART_BORDER
        assert len(lines) == 11
        assert lines[3] == "| Monday     | " + "###".ljust(35) + " | " + "3.0".rjust(14) + "% |"
        assert lines[9] == "| Sunday     | " + ("#" * 12).ljust(35) + " | " + "12.5".rjust(14) + "% |"

    def test_long_bar_is_capped(self):
        rows = [ChartRow(day="Monday", bar_length=100, footprint=250.0)]
        line = ConsoleView()._build_chart(rows)[3]
        assert line.count("#") == 100
        assert line.endswith("250.0% |")

    def test_negative_value_shows_empty_bar(self):
        rows = [ChartRow(day="Friday", bar_length=0, footprint=-2.0)]
        line = ConsoleView()._build_chart(rows)[3]
        assert "#" not in line
        assert line.endswith("-2.0% |")

    def test_render_prints_title(self, capsys):
        ConsoleView().render_weekly_chart([])
        out = capsys.readouterr().out
        assert "Weekly Carbon Footprint Bar Chart:" in out


class TestResourceListing:
    """Test resource output"""

    def test_render_resources(self, capsys):
        ConsoleView().render_resources("Resources", [Resource("R1", "Solar Panel", 12.5)])
        out = capsys.readouterr().out
        assert "Resources:" in out
        assert "ID: R1, Type: Solar Panel, Environmental Impact (CO2e): 12.5" in out
