"""Build a parser in code and parse a few command lines with it."""

from simpleargparse import ArgumentParser, ExitSignal

parser = ArgumentParser(prog="deploy", description="Deploy a service.")
parser.add_argument("service", help="Service to deploy.")
parser.add_argument("-e", "--env", choices=["dev", "prod"], required=True)
parser.add_argument("--dry-run", action="store_true", help="Show what would change.")

commands = parser.add_subparsers(title="targets", dest="target")
cluster = commands.add_parser("cluster", help="Deploy to the cluster.")
cluster.add_argument("--replicas", default="1", help="Replica count.")
commands.add_parser("local", help="Run locally.")

for argv in (
    ["api", "--env", "prod", "cluster", "--replicas", "3"],
    ["api", "--dry-run", "-e", "dev", "local"],
    ["api", "cluster"],
):
    try:
        print(parser.parse_args(argv))
    except ExitSignal as signal:
        print(f"exit code {signal.code}")
