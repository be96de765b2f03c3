from frontend.cli.rich.app import run

__all__ = ["run"]
