import logging


def init_logger(args):
    logging.basicConfig(format='%(message)s')
    level = logging.DEBUG if args.debug else logging.INFO
    logging.getLogger().setLevel(level)
