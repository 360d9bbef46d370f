"""
Stand-in for the heater controller's REST endpoint, for running the
dashboard without hardware.

    python -m heater_dashboard.mock_server --port 8080
    heater-dashboard --endpoint-url http://127.0.0.1:8080/details
"""
import argparse
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

DEFAULT_CPU_TEMP = 25.0
DEFAULT_HEATER_TEMP = 30.0


def create_app(cpu_temp: float = DEFAULT_CPU_TEMP, heater_temp: float = DEFAULT_HEATER_TEMP) -> FastAPI:
    app = FastAPI(title="Heater controller mock", version="0.1.0")
    app.state.cpu_temp = cpu_temp
    app.state.heater_temp = heater_temp

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=".*",
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["Authorization", "Accept", "Content-Type"],
        max_age=3600,
    )

    @app.get("/details")
    def details():
        # controller reports readings rounded to 0.01 °C
        return {
            "cpu_temp": [round(app.state.cpu_temp, 2)],
            "heater_temp": [round(app.state.heater_temp, 2)],
        }

    return app


def main(argv=None):
    import uvicorn

    p = argparse.ArgumentParser(description="Serve a fixed /details response")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8080)
    p.add_argument("--cpu-temp", type=float, default=DEFAULT_CPU_TEMP)
    p.add_argument("--heater-temp", type=float, default=DEFAULT_HEATER_TEMP)
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Serving /details on http://%s:%d", args.host, args.port)
    uvicorn.run(create_app(args.cpu_temp, args.heater_temp), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
