"""Entry point for logscope: python -m logscope"""

import sys

from logscope.app import LogScope
from logscope.config import Settings, configure_logging
from logscope.core.errors import ConfigError


def main() -> None:
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        print("Error running program:", e)
        sys.exit(1)
    configure_logging(settings.log_level)

    app = LogScope(settings)
    try:
        app.run()
    except Exception as e:
        print("Error running program:", e)
        sys.exit(1)
    if app.return_code:
        print(f"Error running program: exited with code {app.return_code}")
        sys.exit(1)


if __name__ == "__main__":
    main()
