import logging
from logging import handlers


class Logger(object):
    level_relations = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warning': logging.WARNING,
        'error': logging.ERROR,
        'crit': logging.CRITICAL
    }

    def __init__(self, filename=None, level='info', when='D', back_count=3,
                 fmt='%(asctime)s - %(pathname)s[line:%(lineno)d] - %(levelname)s: %(message)s',
                 name='tronrouter'):
        self.logger = logging.getLogger(filename or name)
        self.logger.setLevel(self.level_relations.get(level))
        if self.logger.handlers:
            # already configured by an earlier Logger with the same name
            return
        format_str = logging.Formatter(fmt)
        sh = logging.StreamHandler()
        sh.setFormatter(format_str)
        self.logger.addHandler(sh)
        if filename is not None:
            # rotate the file every `when` interval, keeping back_count old files
            th = handlers.TimedRotatingFileHandler(filename=filename, when=when, backupCount=back_count, encoding='utf-8')
            th.setFormatter(format_str)
            self.logger.addHandler(th)
