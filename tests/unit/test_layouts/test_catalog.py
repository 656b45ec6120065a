"""Tests for RaidCatalog lookups and layout summaries."""

from __future__ import annotations

import pytest

from raidcalc.domain.layouts import (
    BaseLayout,
    Layout,
    LayoutInfo,
    LayoutOptions,
    RaidCatalog,
)
from raidcalc.domain.value_objects import GroupDivisionPolicy, RaidLevel


class TestCatalogLookup:
    """Tests for RaidCatalog.get."""

    def test_every_level_has_a_layout(self, catalog: RaidCatalog) -> None:
        """get() is total over RaidLevel."""
        for level in RaidLevel:
            layout = catalog.get(level)
            assert isinstance(layout, BaseLayout)
            assert layout.level is level

    def test_layouts_satisfy_protocol(self, catalog: RaidCatalog) -> None:
        """Every layout instance satisfies the Layout protocol."""
        for level in catalog:
            assert isinstance(catalog.get(level), Layout)

    def test_non_member_lookup_raises(self, catalog: RaidCatalog) -> None:
        """Looking up something that is not a RaidLevel is a programming error."""
        with pytest.raises(KeyError):
            catalog.get("7")  # type: ignore[arg-type]

    def test_layouts_share_options(self) -> None:
        """All layouts see the options the catalog was built with."""
        options = LayoutOptions(group_division=GroupDivisionPolicy.FLOOR)
        catalog = RaidCatalog(options)

        assert catalog.options is options
        assert all(catalog[level].options is options for level in catalog)


class TestDescribe:
    """Tests for RaidCatalog.describe."""

    def test_order_and_labels(self, catalog: RaidCatalog) -> None:
        """Summaries follow RaidLevel order with display labels."""
        labels = [info.label for info in catalog.describe()]

        assert labels == [
            "RAID 0",
            "RAID 1",
            "RAID 1E",
            "RAID 5",
            "RAID 50",
            "RAID 5E",
            "RAID 5EE",
            "RAID 10",
            "RAID 6",
            "RAID 60",
            "RAIDz1 (Single parity)",
            "RAIDz2 (Double parity)",
            "RAIDz3 (Triple parity)",
        ]

    def test_simple_layout_has_no_extra_fields(self, catalog: RaidCatalog) -> None:
        """RAID 5 needs only disk count and capacity."""
        info = catalog.describe()[3]

        assert info == LayoutInfo(
            level=RaidLevel.RAID5,
            label="RAID 5",
            additional_fields={},
            hidden_fields=frozenset(),
        )

    def test_nested_layout_fields(self, catalog: RaidCatalog) -> None:
        """RAID 50 and 60 ask for the number of parity groups."""
        infos = {info.level: info for info in catalog.describe()}

        assert infos[RaidLevel.RAID50].additional_fields == {
            "parityRaidCount": "Number of RAID 5 groups"
        }
        assert infos[RaidLevel.RAID60].additional_fields == {
            "parityRaidCount": "Number of RAID 6 groups"
        }

    def test_raidz_fields_and_hint(self, catalog: RaidCatalog) -> None:
        """RAID-Z asks for groups and drives and hides the disk count."""
        info = catalog.describe()[-1]

        assert info.level is RaidLevel.RAIDZ3
        assert info.additional_fields == {
            "numOfDriveGroups": "Number of groups",
            "numDrivesPerGroup": "Drives per group",
        }
        assert info.hidden_fields == frozenset({"disks"})
