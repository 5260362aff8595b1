"""Viking Forge dev launcher. Optionally generates synthetic Vikings, then starts the API."""

import argparse
import os
import random
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")


def main():
    parser = argparse.ArgumentParser(description="Viking Forge dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Data storage directory (default: ./data)")
    parser.add_argument("--make", type=int, default=0, metavar="N",
                        help="Generate N synthetic Vikings before starting")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for synthetic generation")
    args = parser.parse_args()

    # Build env for the server so it picks up the same data dir
    env = os.environ.copy()
    if args.data_dir:
        env["DATA_DIR"] = str(args.data_dir.resolve())
        os.environ["DATA_DIR"] = env["DATA_DIR"]

    if args.make:
        from vikings import storage
        from vikings.generator import generate_raw_input
        from vikings.pipeline import generate_batch
        from vikings.settings import configure_logging, load_settings

        settings = load_settings()
        configure_logging(settings.log_level)
        storage.init_storage(settings.data_dir)
        rng = random.Random(args.seed)
        start = storage.count_vikings()
        payloads = {n: generate_raw_input(rng) for n in range(start, start + args.make)}
        report = generate_batch(payloads.keys(), payloads.__getitem__, settings)
        print(f"Created {len(report.created)}, skipped {len(report.skipped)}, failed {len(report.failed)}")

    print(f"Starting backend on http://localhost:{BACKEND_PORT} ...")
    proc = subprocess.Popen(
        [sys.executable, "-m", "uvicorn", "vikings.app:app", "--reload", "--host", HOST, "--port", BACKEND_PORT],
        cwd=ROOT, env=env,
    )
    try:
        proc.wait()
    except KeyboardInterrupt:
        print("\nShutting down...")
        proc.terminate()
        proc.wait()


if __name__ == "__main__":
    main()
