from coverage_single_html.cli import run

if __name__ == "__main__":  # pragma: no cover - executed only via `python -m`
    run()
