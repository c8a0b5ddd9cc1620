import argparse
import importlib.util
import logging
import os
import sys

from bf.utils.config_wrapper import ConfigWrapper


def load_config(args):
    if not os.path.exists(args.config):
        logging.error(f'XX File does not exist {args.config}')
        sys.exit(1)

    logging.info(f'>> Loading configuration from {args.config}')
    config_spec = importlib.util.spec_from_file_location('config', args.config)
    config = importlib.util.module_from_spec(config_spec)
    config_spec.loader.exec_module(config)

    return ConfigWrapper(config)

def get_default_argparser():
    parser = argparse.ArgumentParser()
    parser.add_argument('--config', default='./config.py',
                        help='Path to a config file')
    parser.add_argument('--debug', default=False, action='store_true',
                        help='Debug mode. Enables verbose logging')
    return parser
