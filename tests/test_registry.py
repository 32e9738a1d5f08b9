import pytest

from ncmcheck.errors import InvalidDatasetError
from ncmcheck.registry.builder import RegistryHolder, build_registry
from ncmcheck.utils.fields import DESCRIPTION_KEYS, resolve_field


def test_build_from_container():
    raw = {
        "Nomenclaturas": [
            {"Codigo": "8471.30.19", "Descricao": "Máquinas", "Data_Inicio": "01/04/2022", "Data_Fim": "31/12/9999"},
            {"Codigo": "01", "Descricao": "Animais vivos."},
        ]
    }
    reg = build_registry(raw)
    assert len(reg) == 2
    assert "84713019" in reg and "01" in reg
    assert reg.get("84713019").description == "Máquinas"
    assert reg.get("00000000") is None


def test_build_lowercase_and_plain_list():
    reg = build_registry({"nomenclaturas": [{"codigo": "0101.21.00", "descricao": "Reprodutores"}]})
    assert reg.get("01012100").description == "Reprodutores"
    reg = build_registry([{"DataInicio": "2020-01-01", "Codigo": 1234}])
    assert reg.get("1234").start_raw == "2020-01-01"


def test_duplicate_code_last_wins():
    reg = build_registry({"Nomenclaturas": [{"Codigo": "1", "Descricao": "X"}, {"Codigo": "1", "Descricao": "Y"}]})
    assert len(reg) == 1
    assert reg.get("1").description == "Y"


def test_records_without_code_are_skipped():
    reg = build_registry({"Nomenclaturas": [{"Descricao": "sem código"}, {"Codigo": "--"}, "lixo", None, {"Codigo": "22"}]})
    assert list(reg) == ["22"]


def test_null_dataset_raises():
    with pytest.raises(InvalidDatasetError):
        build_registry(None)


@pytest.mark.parametrize("raw", [{"foo": []}, {"Nomenclaturas": "x"}, "texto", 42])
def test_non_list_collection_raises(raw):
    with pytest.raises(InvalidDatasetError):
        build_registry(raw)


def test_non_strict_degrades_to_empty():
    assert len(build_registry(None, strict=False)) == 0
    assert len(build_registry({"Nomenclaturas": {}}, strict=False)) == 0


def test_registry_is_read_only():
    reg = build_registry([{"Codigo": "11"}])
    with pytest.raises(TypeError):
        reg.records["22"] = None


def test_as_of_from_metadata():
    reg = build_registry({"Data_Ultima_Atualizacao_NCM": "Vigente em 01/04/2025", "Nomenclaturas": []})
    assert reg.as_of == "Vigente em 01/04/2025"
    assert reg.base_date_label() == "Base NCM vigente em: Vigente em 01/04/2025"


def test_as_of_from_latest_start():
    reg = build_registry({"Nomenclaturas": [
        {"Codigo": "01", "Data_Inicio": "01/04/2022"},
        {"Codigo": "02", "Data_Inicio": "2023-07-15"},
        {"Codigo": "03", "Data_Inicio": "invalida"},
    ]})
    assert reg.as_of == "15/07/2023"


def test_as_of_missing():
    reg = build_registry([{"Codigo": "01"}])
    assert reg.as_of is None
    assert reg.base_date_label() == "Base NCM vigente em: —"


def test_resolve_field_order_and_blanks():
    assert resolve_field({"descricao": "b", "Descricao": "a"}, DESCRIPTION_KEYS) == "a"
    assert resolve_field({"Descricao": "", "Descrição": "c"}, DESCRIPTION_KEYS) == "c"
    assert resolve_field({}, DESCRIPTION_KEYS) is None
    assert resolve_field(["Descricao"], DESCRIPTION_KEYS) is None


def test_holder_swaps_snapshot():
    holder = RegistryHolder()
    assert holder.current is None
    first = holder.replace([{"Codigo": "01"}])
    assert holder.current is first
    second = holder.replace([{"Codigo": "02"}])
    assert holder.current is second
    assert "01" in first and "01" not in second


def test_holder_keeps_snapshot_on_bad_dataset():
    holder = RegistryHolder()
    first = holder.replace([{"Codigo": "01"}])
    with pytest.raises(InvalidDatasetError):
        holder.replace(None)
    assert holder.current is first


def test_record_with_non_string_key_is_kept():
    reg = build_registry([{"Codigo": "84713019", 1: "x"}, {"Codigo": "01"}])
    assert len(reg) == 2
    assert reg.get("84713019").description is None
