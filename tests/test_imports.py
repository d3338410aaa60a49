def test_import_lom_package() -> None:
    import importlib

    module = importlib.import_module("lom")
    assert module is not None
    assert module.__version__


def test_import_rng_no_side_effects() -> None:
    from lom.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_services_without_loading_definitions() -> None:
    from lom.services.combat_service import CombatService
    from lom.services.config_validator import validate_balance_config
    from lom.services.spell_service import SpellService

    assert CombatService and SpellService and validate_balance_config
