# The command: sprig config <key> <value>
# What it does: A user-facing command to set a configuration key-value pair (e.g., log.timezone)
# How it does: It acts as a simple dispatcher, passing the key and value to the `write_config` function in the `utils/config.py` module, which handles the file I/O and parsing logic
# What data structure it uses: None directly, but it provides the interface to the underlying Map / Dictionary structure managed by `utils/config.py`

from utils import config as config_utils
from utils.repository import Repository


def do_config(repo, key, value):
    config_utils.write_config(repo.root, key, value)


def run(args):
    repo = Repository.open()
    do_config(repo, args.key, args.value)
    print(f"Set {args.key} to '{args.value}'")
