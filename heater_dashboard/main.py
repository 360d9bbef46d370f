import asyncio
import logging
import sys
from qasync import QEventLoop
from PyQt6.QtWidgets import QApplication
from heater_dashboard.core.config import ConfigError, build_parser, load_config
from heater_dashboard.ui.main_window import TemperatureDashboard
from heater_dashboard.ui.render_context import RenderContext

def main(argv=None):
    parser = build_parser()
    try:
        config = load_config(argv, parser)
    except ConfigError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv[:1])
    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)

    context = RenderContext.from_config(config)
    window = TemperatureDashboard(config, context)
    window.show()

    with loop:
        loop.run_forever()
        # window closed and timers stopped; release the connection pool
        loop.run_until_complete(window.fetcher.aclose())

if __name__ == "__main__":
    main()
