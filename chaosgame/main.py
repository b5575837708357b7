import logging
import os

from chaosgame import config
from chaosgame.engine import Engine
from chaosgame.render.canvas import SurfaceUnavailableError

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("CHAOSGAME_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config.load_config()
    try:
        engine = Engine(cfg)
    except SurfaceUnavailableError as exc:
        logger.critical("%s", exc)
        raise SystemExit(1)
    engine.run()


if __name__ == "__main__":
    main()
