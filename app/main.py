import argparse
import sys

import uvicorn

from infrastructure.configuration import ConfigurationError, load_settings
from infrastructure.i18n import LocaleLoadError
from infrastructure.logging import configure_logging, get_module_logger
from server.server import create_app

logger = get_module_logger()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="send-server",
        description="File sharing server",
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config_location",
        help="Path to the configuration file",
    )
    return parser.parse_args(argv)


def list_configs(settings):
    """Log the loaded configuration keys."""
    config_settings = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def main(argv=None) -> int:
    """Main function to start the application."""
    args = parse_args(argv)

    try:
        settings = load_settings(args.config_location)
    except ConfigurationError as e:
        logger.error("configuration_failed", error=str(e))
        return 1

    configure_logging(settings=settings)
    logger.info("application_startup", servername=settings.server.SERVERNAME)
    list_configs(settings)

    try:
        app = create_app(settings)
    except (ConfigurationError, LocaleLoadError) as e:
        logger.error("application_startup_failed", error=str(e))
        return 1

    uvicorn.run(app, host=settings.server.host, port=settings.server.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
