from __future__ import annotations
from typing import Any, Mapping, Sequence

# Upstream exports disagree on casing and accents; each tuple is tried in order.
CONTAINER_KEYS = ("Nomenclaturas", "nomenclaturas")
CODE_KEYS = ("Codigo", "codigo")
DESCRIPTION_KEYS = ("Descricao", "descricao", "Descrição")
START_KEYS = ("Data_Inicio", "data_inicio", "DataInicio")
END_KEYS = ("Data_Fim", "data_fim", "DataFim")
AS_OF_KEYS = ("Data_Ultima_Atualizacao_NCM", "data_ultima_atualizacao_ncm")


def resolve_field(record: Any, names: Sequence[str]) -> Any | None:
    """Return the first usable value among ``names`` in ``record``.

    ``None`` and empty strings count as missing, so the next spelling is
    tried. Records that are not mappings resolve to ``None``.
    """
    if not isinstance(record, Mapping):
        return None
    for name in names:
        value = record.get(name)
        if value is None or value == "":
            continue
        return value
    return None
