"""Entry point delegating to the glue pipeline CLI."""

from choice_hh.glue.pipeline import main as pipeline_main


def main() -> None:
    pipeline_main()


if __name__ == "__main__":
    main()
