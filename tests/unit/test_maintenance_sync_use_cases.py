"""
Tests del upsert de mantenimientos contra una base Store SQLite.
"""
from decimal import Decimal

import pytest

from dns_sync.application.use_cases.maintenance_sync_use_cases import MaintenanceSyncUseCases
from dns_sync.domain.entities.maintenance import MaintenanceDNS
from tests.conftest import STORE_TABLE, add_failing_trigger, fetch_rows, insert_rows


def _maintenance(plan_id, **overrides):
    values = dict(
        id=plan_id,
        modelo="CX-5",
        ano=2022,
        descripcion=f"Plan {plan_id}",
        kilometraje=10000,
        notas="Cambio de aceite",
        precio=Decimal("89.90"),
    )
    values.update(overrides)
    return MaintenanceDNS(**values)


async def _rows(engine):
    return await fetch_rows(
        engine,
        f"SELECT id, id_dns, modelo, ano, descripcion, kilometraje, operacion, precio "
        f"FROM {STORE_TABLE} ORDER BY id",
    )


@pytest.mark.asyncio
async def test_absent_plan_is_inserted(store_engine):
    use_cases = MaintenanceSyncUseCases(store_engine, table=STORE_TABLE)

    result = await use_cases.synchronize([_maintenance(42)])

    rows = await _rows(store_engine)
    assert len(rows) == 1
    assert rows[0]["id_dns"] == 42
    assert rows[0]["operacion"] == "Cambio de aceite"
    assert float(rows[0]["precio"]) == pytest.approx(89.90)
    assert result.inserted == 1
    assert result.updated == 0


@pytest.mark.asyncio
async def test_existing_plan_is_updated_in_place(store_engine):
    await insert_rows(
        store_engine,
        STORE_TABLE,
        [{
            "id": 7, "id_dns": 42, "modelo": "CX-3", "ano": 2019, "descripcion": "Viejo",
            "kilometraje": 5000, "operacion": "Revision", "precio": 50,
        }],
    )
    use_cases = MaintenanceSyncUseCases(store_engine, table=STORE_TABLE)

    result = await use_cases.synchronize([_maintenance(42, notas="Cambio de frenos")])

    rows = await _rows(store_engine)
    assert len(rows) == 1
    row = rows[0]
    assert row["id"] == 7
    assert row["modelo"] == "CX-5"
    assert row["ano"] == 2022
    assert row["descripcion"] == "Plan 42"
    assert row["kilometraje"] == 10000
    assert row["operacion"] == "Cambio de frenos"
    assert result.updated == 1
    assert result.inserted == 0


@pytest.mark.asyncio
async def test_second_run_with_same_input_is_idempotent(store_engine):
    use_cases = MaintenanceSyncUseCases(store_engine, table=STORE_TABLE)
    plans = [_maintenance(1), _maintenance(2)]

    first = await use_cases.synchronize(plans)
    after_first = await _rows(store_engine)
    second = await use_cases.synchronize(plans)
    after_second = await _rows(store_engine)

    assert first.inserted == 2
    assert second.inserted == 0
    assert second.updated == 2
    assert after_second == after_first


@pytest.mark.asyncio
async def test_insert_failure_on_second_record_does_not_stop_pipeline(store_engine, log_messages):
    await add_failing_trigger(store_engine, STORE_TABLE, "INSERT", "NEW.id_dns = 2")
    use_cases = MaintenanceSyncUseCases(store_engine, table=STORE_TABLE)

    result = await use_cases.synchronize([_maintenance(1), _maintenance(2), _maintenance(3)])

    assert [row["id_dns"] for row in await _rows(store_engine)] == [1, 3]
    assert result.inserted == 2
    assert result.failed == 1
    assert result.errors[0].key == "2"
    assert result.errors[0].error_code == "WRITE_ERROR"
    assert any("Plan 2 - 2" in m for m in log_messages)


@pytest.mark.asyncio
async def test_null_fields_are_written_as_null(store_engine):
    use_cases = MaintenanceSyncUseCases(store_engine, table=STORE_TABLE)

    await use_cases.synchronize([_maintenance(9, notas=None, precio=None)])

    [row] = await _rows(store_engine)
    assert row["operacion"] is None
    assert row["precio"] is None
