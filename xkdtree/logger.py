import logging

logger = logging.getLogger("xkdtree")


def _install_handler(log):
    """给包 logger 挂一个 StreamHandler，重复 import 时不重复添加。"""
    for h in log.handlers:
        if getattr(h, "xkdtree_handler", False):
            return h
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
    handler.xkdtree_handler = True
    log.addHandler(handler)
    return handler


_install_handler(logger)
logger.setLevel(logging.INFO)


def set_debug(enabled: bool) -> None:
    """打开后记录每次叶子分裂和删除。"""
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)
