import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = os.getenv("FACTORIAL_LOG_DIR", "logs")
LOG_LEVEL = os.getenv("FACTORIAL_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def env_enabled(name, default=True):
    """
    Читает булев флаг из переменной окружения.

    :param name: Имя переменной окружения
    :param default: Значение, если переменная не задана
    :return: False для "0", "false", "no", "off", иначе True
    """
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}


def setup_logging(service_name, log_dir=None, level=None):
    """
    Настраивает логирование для указанного сервиса.

    Структура папок:
    logs/
        {service_name}.log   - ротируемый лог сервиса (10 MB x 5)

    Повторный вызов заменяет хендлеры, а не дублирует их.

    :param service_name: Имя сервиса (строка)
    :param log_dir: Папка для логов, по умолчанию FACTORIAL_LOG_DIR
    :param level: Уровень логирования, по умолчанию FACTORIAL_LOG_LEVEL
    :return: Логгер для сервиса
    """
    logs_dir = Path(log_dir or LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True, mode=0o755)

    level = level or LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level)
        if not isinstance(level, int):
            level = logging.INFO

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    service_handler = RotatingFileHandler(
        str(logs_dir / f'{service_name}.log'),
        maxBytes=10*1024*1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    service_handler.setFormatter(formatter)
    service_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    for handler in logger.handlers:
        handler.close()
    logger.handlers = [service_handler, console_handler]

    # Логи библиотеки factorial_provider идут в те же хендлеры
    library_logger = logging.getLogger("factorial_provider")
    if library_logger is not logger:
        library_logger.setLevel(level)
        library_logger.handlers = [service_handler, console_handler]
        library_logger.propagate = False

    return logger
