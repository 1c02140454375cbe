"""Run the kubectl-hello command line without installing the package."""

from kubehello.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
