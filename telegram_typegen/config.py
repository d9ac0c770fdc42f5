"""
Конфигурация генератора деклараций
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import toml

CONFIG_FILE_NAME = "typegen.toml"

OUTPUT_PATH = "./out"
SCHEMA_FILE_PATH = "./tg-bot-api/public/dev/custom.min.json"
CURRENCIES_URL = "https://core.telegram.org/bots/payments/currencies.json"
OBJECTS_PREFIX = "Telegram"


@dataclass
class TypegenConfig:
    """Конфигурация генератора TypeScript деклараций"""

    schema_path: str = SCHEMA_FILE_PATH
    output_dir: str = OUTPUT_PATH
    currencies_url: str = CURRENCIES_URL
    prefix: str = OBJECTS_PREFIX
    # Команда форматтера, "{path}" заменяется на путь файла
    formatter: Optional[List[str]] = field(default=None)

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE_NAME, search_dir: str = None
    ) -> Optional["TypegenConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE_NAME)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        config_data = toml.load(config_path)
        return cls(
            schema_path=config_data.get("schema_path", SCHEMA_FILE_PATH),
            output_dir=config_data.get("output_dir", OUTPUT_PATH),
            currencies_url=config_data.get("currencies_url", CURRENCIES_URL),
            prefix=config_data.get("prefix", OBJECTS_PREFIX),
            formatter=config_data.get("formatter"),
        )

    def save_to_file(self, config_path: str = CONFIG_FILE_NAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            "schema_path": self.schema_path,
            "output_dir": self.output_dir,
            "currencies_url": self.currencies_url,
            "prefix": self.prefix,
        }
        if self.formatter:
            config_data["formatter"] = self.formatter

        with open(config_path, "w") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "TypegenConfig":
        """Объединение с аргументами командной строки"""
        return TypegenConfig(
            schema_path=args.schema or self.schema_path,
            output_dir=args.output or self.output_dir,
            currencies_url=self.currencies_url,
            prefix=self.prefix,
            formatter=None if args.no_format else self.formatter,
        )
