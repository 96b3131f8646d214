"""
Journalisation d'AppReg via loguru.

Trois sorties :
- stderr : lignes colorées pour suivre les inscriptions et les balayages
- journal technique : JSON avec rotation, tous niveaux
- journal des notifications : une ligne par message envoyé à un demandeur,
  alimentée uniquement par le niveau NOTIFY

Le niveau NOTIFY est celui qu'utilise LoggingNotificationClient. Il se place
juste au-dessus d'INFO pour rester visible avec la configuration par défaut.
"""

import sys
from pathlib import Path

from loguru import logger

from src.config import Settings

NOTIFICATION_LEVEL = "NOTIFY"
NOTIFICATION_LEVEL_NO = 22

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
_NOTIFICATION_FORMAT = "{time:YYYY-MM-DD HH:mm:ss!UTC} | {extra[recipient]} | {message}"


def register_notification_level() -> None:
    """Déclare le niveau NOTIFY auprès de loguru (sans effet s'il existe déjà)."""
    try:
        logger.level(NOTIFICATION_LEVEL)
    except ValueError:
        logger.level(NOTIFICATION_LEVEL, no=NOTIFICATION_LEVEL_NO, color="<magenta>")


def _is_notification(record) -> bool:
    return record["level"].name == NOTIFICATION_LEVEL and "recipient" in record["extra"]


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/appreg.log"),
    notification_file: Path = Path("logs/notifications.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les handlers loguru par ceux d'AppReg.

    Args :
        log_level : Niveau minimum affiché sur stderr
        log_file : Journal technique JSON
        notification_file : Journal des notifications envoyées aux demandeurs
        rotation_size : Taille déclenchant la rotation des deux journaux
        retention_count : Nombre de fichiers tournés conservés
    """
    register_notification_level()
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=_CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    # Ecriture synchrone : une notification journalisée est lisible aussitôt
    notification_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        notification_file,
        level=NOTIFICATION_LEVEL,
        format=_NOTIFICATION_FORMAT,
        filter=_is_notification,
        rotation=rotation_size,
        retention=retention_count,
    )

    logger.debug(
        "Logging configuré",
        log_file=str(log_file),
        notification_file=str(notification_file),
    )


def configure_logging_from_settings(settings: Settings, log_level: str | None = None) -> None:
    """Configure le logging à partir des Settings, niveau console surchargeable."""
    configure_logging(
        log_level=log_level or settings.log_level,
        log_file=settings.log_file,
        notification_file=settings.notification_log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
