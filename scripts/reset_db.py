import sys
from pathlib import Path

# Ensure project root is on sys.path so `recipe_api` can be imported
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))  # noqa: E402

from recipe_api.config import Settings, configure_logging  # noqa: E402
from recipe_api.db import Store  # noqa: E402
from recipe_api.errors import ResetError  # noqa: E402
from recipe_api.reset import reset_to_base_seed  # noqa: E402


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    if settings.is_production and "--force" not in sys.argv:
        print("Refusing to reset a production database without --force")
        return 1
    store = Store(settings.store_url)
    try:
        store.create_all()
        reset_to_base_seed(store)
    except ResetError as exc:
        print(f"Reset failed: {exc}")
        return 1
    finally:
        store.dispose()
    print("Database reset to the base seed")
    return 0


if __name__ == '__main__':
    sys.exit(main())
