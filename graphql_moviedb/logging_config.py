"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, pour suivre les requêtes
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse des appels TMDB
"""

import logging
import sys
from pathlib import Path

from loguru import logger

# Loggers standard re-routes vers loguru (serveur ASGI, moteur GraphQL)
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "strawberry.execution")


class InterceptHandler(logging.Handler):
    """Handler logging standard qui transmet chaque enregistrement a loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/graphql-moviedb.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver

    Les champs structurés passés aux appels de log (path, version, operation...)
    sont conservés dans les enregistrements JSON du fichier.
    """
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Handler fichier - JSON pour l'analyse
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Capture tous les niveaux (appels REST en DEBUG)
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    # Logs des bibliotheques basees sur logging
    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
