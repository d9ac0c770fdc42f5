import logging
import subprocess
from typing import Sequence

from ..types.errors import FormatterError

logger = logging.getLogger(__name__)


class CommandFormatter:
    """
    Форматирование текста внешней командой (например, prettier).

    Текст передаётся в stdin, результат читается из stdout. Плейсхолдер
    ``{path}`` в аргументах заменяется на путь форматируемого файла.
    """

    def __init__(self, command: Sequence[str]):
        if not command:
            raise ValueError("Команда форматтера не указана")

        self.command = list(command)

    def format(self, text: str, path: str) -> str:
        args = [part.replace("{path}", path) for part in self.command]
        logger.debug("Форматирование %s: %s", path, " ".join(args))

        try:
            result = subprocess.run(
                args, input=text, capture_output=True, text=True, check=False
            )
        except OSError as e:
            raise FormatterError(f"Не удалось запустить форматтер {args[0]}: {e}") from e

        if result.returncode != 0:
            raise FormatterError(
                f"Форматтер завершился с кодом {result.returncode} для {path}: "
                f"{result.stderr.strip()}"
            )

        return result.stdout
