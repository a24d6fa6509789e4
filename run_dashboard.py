import argparse
import logging
import os
import socket
import subprocess
import sys
import time
import webbrowser

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def _pick_free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return int(s.getsockname()[1])


def build_streamlit_command(app_path: str, port: int) -> list[str]:
    # Lance Streamlit dans ce même environnement Python.
    return [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        app_path,
        "--server.address",
        "localhost",
        "--server.port",
        str(port),
        "--server.headless",
        "true",
    ]


def main(argv: list[str] | None = None) -> int:
    here = os.path.dirname(os.path.abspath(__file__))

    ap = argparse.ArgumentParser(add_help=True, description="Lance le dashboard de télémétrie.")
    ap.add_argument(
        "--dataset",
        default=None,
        help="Fichier JSON de télémétrie (sinon: TELEMETRY_DATASET_PATH ou data/combined.json).",
    )
    ap.add_argument("--port", type=int, default=0, help="Port HTTP (défaut: port libre)")
    ap.add_argument("--no-browser", action="store_true", help="N'ouvre pas le navigateur")
    args, _unknown = ap.parse_known_args(argv)

    app_path = os.path.join(here, "streamlit_app.py")
    if not os.path.exists(app_path):
        logger.error(f"Introuvable: {app_path}")
        return 2

    # Un dataset explicite est transmis à Streamlit via l'environnement.
    if args.dataset:
        dataset = os.path.abspath(args.dataset)
        if not os.path.isfile(dataset):
            logger.warning(f"Dataset introuvable: {dataset} (le dashboard restera vide)")
        os.environ["TELEMETRY_DATASET_PATH"] = dataset

    port = int(args.port) or _pick_free_port()
    url = f"http://localhost:{port}"

    logger.info("Lancement du dashboard…")
    logger.info(f"URL: {url}")

    proc = subprocess.Popen(build_streamlit_command(app_path, port), cwd=here)
    if not args.no_browser:
        time.sleep(1.2)
        try:
            webbrowser.open(url)
        except webbrowser.Error:
            pass

    try:
        return int(proc.wait())
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
