import pytest

from license_guardian.data.sku_names import SKU_NAMES, SkuNameResolver, friendly_name, resolve_sku_name


def test_known_part_number_resolves():
    assert resolve_sku_name("ENTERPRISEPACK") == "Office 365 E3"
    assert resolve_sku_name("SPE_E5") == "Microsoft 365 E5"


@pytest.mark.parametrize("code", ["NOT_A_REAL_SKU", "enterprisepack", "", None])
def test_unknown_part_number_returns_none(code):
    assert resolve_sku_name(code) is None
    assert friendly_name(code) == ""


def test_suffixed_variants_listed_resolve_to_their_own_name():
    assert resolve_sku_name("ENTERPRISEPACK_GOV") == "Office 365 G3 GCC"
    assert resolve_sku_name("EXCHANGEENTERPRISE_FACULTY") == "Exchange Online (Plan 2) for Faculty"


def test_unlisted_suffix_falls_back_to_base_product():
    assert resolve_sku_name("VISIOCLIENT_STUDENT") == "Visio Online Plan 2"


def test_first_matching_entry_wins():
    resolver = SkuNameResolver({"PACK": "Generic pack", "ENTERPRISEPACK": "Office 365 E3"})

    assert resolver.resolve("ENTERPRISEPACK") == "Generic pack"


def test_no_entry_is_shadowed_by_an_earlier_one():
    codes = list(SKU_NAMES)
    for index, code in enumerate(codes):
        for earlier in codes[:index]:
            assert earlier not in code, f"{code} is shadowed by {earlier}"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        SKU_NAMES["NEW_SKU"] = "Something"  # type: ignore[index]


def test_table_covers_newer_and_regional_products():
    assert len(SKU_NAMES) > 350
    assert resolve_sku_name("Microsoft_365_E3_(no_Teams)") == "Microsoft 365 E3 (no Teams)"
    assert resolve_sku_name("STREAM_STORAGE") == "Microsoft Stream Storage Add-On (500 GB)"
    assert resolve_sku_name("POWER_BI_STANDARD_FACULTY") == "Microsoft Fabric (Free) for faculty"
