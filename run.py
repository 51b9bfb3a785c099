import argparse

from keeplater import create_app


def main() -> None:
    p = argparse.ArgumentParser(prog="keeplater")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8787)
    p.add_argument("--debug", action="store_true")
    args = p.parse_args()

    create_app().run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
