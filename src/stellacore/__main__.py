from pathlib import Path
import logging
import sys

from dotenv import load_dotenv

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from stellacore.bootstrap import create_simulation, resolve_log_level
from stellacore.domain.errors import InternalInvariantViolation
from stellacore.presentation.holo_renderer import HoloRenderer
from stellacore.presentation.scenario_loop import run_scenario


def main() -> int:
    load_dotenv()
    logging.basicConfig(level=resolve_log_level(), format="%(levelname)s %(name)s: %(message)s")
    try:
        context = create_simulation()
        run_scenario(context, HoloRenderer(rng=context.rng))
    except KeyboardInterrupt:
        print("\nSession ended.")
    except InternalInvariantViolation as exc:
        print("The universe catalogs cannot support this configuration.")
        print(f"Reason: {exc}")
        return 2
    except Exception as exc:
        logging.getLogger(__name__).debug("Scenario aborted", exc_info=True)
        print("An unexpected error occurred. The simulation closed safely.")
        print(f"Reason: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
