import asyncio

import pytest

from conftest import E3, E5

from license_guardian.exceptions import SkuNotFoundError
from license_guardian.integrations.directory import MockDirectoryService
from license_guardian.models.license import AssignmentPath
from license_guardian.services.license_report import LicenseReportService


def test_all_mode_excludes_skus_without_consumed_units(directory):
    service = LicenseReportService(directory)

    skus = asyncio.run(service.get_target_skus(check_all=True))

    assert [sku.part_number for sku in skus] == ["ENTERPRISEPACK", "ENTERPRISEPREMIUM"]


def test_all_mode_sorted_by_friendly_name(directory):
    service = LicenseReportService(directory)

    skus = asyncio.run(service.get_target_skus(check_all=True))

    assert [sku.friendly_name for sku in skus] == ["Office 365 E3", "Office 365 E5"]


def test_single_sku_by_part_number_or_id(directory):
    service = LicenseReportService(directory)

    by_code = asyncio.run(service.get_target_skus(sku="ENTERPRISEPREMIUM"))
    by_id = asyncio.run(service.get_target_skus(sku=E5))

    assert by_code == by_id
    assert by_code[0].id == E5


def test_single_sku_id_match_ignores_case(directory):
    service = LicenseReportService(directory)

    skus = asyncio.run(service.get_target_skus(sku=E5.upper()))

    assert [sku.id for sku in skus] == [E5]


def test_single_sku_part_number_match_is_case_sensitive(directory):
    service = LicenseReportService(directory)

    with pytest.raises(SkuNotFoundError):
        asyncio.run(service.get_target_skus(sku="enterprisepremium"))


def test_single_sku_unknown_raises(directory):
    service = LicenseReportService(directory)

    with pytest.raises(SkuNotFoundError):
        asyncio.run(service.get_target_skus(sku="NOPE"))


@pytest.mark.parametrize("kwargs", [{}, {"sku": "ENTERPRISEPACK", "check_all": True}])
def test_scope_requires_exactly_one_mode(directory, kwargs):
    service = LicenseReportService(directory)

    with pytest.raises(ValueError):
        asyncio.run(service.get_target_skus(**kwargs))


def test_get_report_returns_rows_for_requested_path(directory):
    service = LicenseReportService(directory)

    rows = asyncio.run(service.get_report(AssignmentPath.DIRECTLY, sku="ENTERPRISEPACK"))

    assert [row.user_id for row in rows] == ["carl", "zoe"]
    assert all(row.sku_id == E3 for row in rows)


def test_get_report_all_mode_spans_skus(directory):
    service = LicenseReportService(directory)

    rows = asyncio.run(service.get_report("Directly", check_all=True))

    assert [(row.sku_part_number, row.user_id) for row in rows] == [
        ("ENTERPRISEPACK", "carl"),
        ("ENTERPRISEPACK", "zoe"),
        ("ENTERPRISEPREMIUM", "adam"),
    ]


def test_query_failure_propagates(skus):
    class BrokenDirectory(MockDirectoryService):
        async def list_licensed_users(self, sku_id):
            raise RuntimeError("Graph unavailable")

    service = LicenseReportService(BrokenDirectory(skus=skus, users=[]))

    with pytest.raises(RuntimeError):
        asyncio.run(service.get_report(AssignmentPath.DIRECTLY, check_all=True))
