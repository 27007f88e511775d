# The command: plumb config <key> [<value>]
# What it does: Reads or sets a configuration key in `.git/config` (e.g., core.compression)
# How it does: It passes the key and value to `utils/config.py`, which handles the INI file I/O and parsing
# What data structure it uses: None directly, but it provides the interface to the underlying Map / Dictionary structure managed by `utils/config.py`

import sys
from utils import config as config_utils
from utils import repository
from utils.errors import PlumbError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print(repository.NOT_A_REPOSITORY, file=sys.stderr)
        sys.exit(1)

    try:
        if args.value is None:
            value = config_utils.get_config_value(repo_root, args.key)
            if value is None:
                sys.exit(1)
            print(value)
        else:
            config_utils.write_config(repo_root, args.key, args.value)
    except (PlumbError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
