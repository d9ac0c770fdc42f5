import argparse
import logging
import os
import sys
from datetime import datetime
from typing import Optional

import httpx

from telegram_typegen.config import CONFIG_FILE_NAME, TypegenConfig
from telegram_typegen.generator import BotApiTypesGenerator
from telegram_typegen.internal.generator.formatter import CommandFormatter
from telegram_typegen.internal.parser.schema import load_schema
from telegram_typegen.internal.patches.currencies import fetch_currencies
from telegram_typegen.internal.types.models import Project

logger = logging.getLogger(__name__)


def _generate_core(
    config: TypegenConfig,
    client: Optional[httpx.Client] = None,
    generated_at: Optional[datetime] = None,
) -> Project:
    """Ядро генерации - только генерация без сохранения"""
    print(f"📥 Загрузка схемы из {config.schema_path}...")
    schema = load_schema(config.schema_path)

    print("💱 Загрузка списка валют...")
    currencies = fetch_currencies(config.currencies_url, client=client)

    print("⚙️ Генерация деклараций...")
    generator = BotApiTypesGenerator(
        schema, currencies, prefix=config.prefix, generated_at=generated_at
    )
    return generator.generate()


def _save_project_files(
    project: Project, target_path: str, formatter: Optional[CommandFormatter] = None
):
    """Сохранение файлов проекта"""
    print(f"💾 Сохранение {len(project.files)} файлов...")
    os.makedirs(target_path, exist_ok=True)

    # Сначала форматируем всё, чтобы ошибка форматтера не оставила половину файлов
    contents = []
    for code_file in project.files:
        path = os.path.join(target_path, code_file.file_name)
        text = str(code_file)
        if formatter:
            text = formatter.format(text, path)
        contents.append((path, text))

    for path, text in contents:
        logger.debug("Запись %s", path)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)

    print("✅ Генерация завершена успешно!")
    print(f"📦 Декларации созданы в: {os.path.abspath(target_path)}")


def run(
    config: TypegenConfig,
    client: Optional[httpx.Client] = None,
    generated_at: Optional[datetime] = None,
) -> Project:
    """Генерация и запись деклараций по конфигурации"""
    project = _generate_core(config, client=client, generated_at=generated_at)
    formatter = CommandFormatter(config.formatter) if config.formatter else None
    _save_project_files(project, config.output_dir, formatter)
    return project


def generate(argv=None):
    """Генерация TypeScript деклараций Telegram Bot API"""
    parser = argparse.ArgumentParser(
        description="Генерация TypeScript деклараций из схемы Telegram Bot API"
    )
    parser.add_argument("--schema", type=str, help="Путь к JSON схеме Bot API")
    parser.add_argument("--output", type=str, help="Директория для деклараций")
    parser.add_argument(
        "--config", type=str, default=CONFIG_FILE_NAME, help="Путь к typegen.toml"
    )
    parser.add_argument(
        "--init-config", action="store_true", help="Создать конфиг файл typegen.toml"
    )
    parser.add_argument(
        "--no-format", action="store_true", help="Не запускать форматтер"
    )
    parser.add_argument("--verbose", action="store_true", help="Подробный лог")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        file_config = TypegenConfig.from_file(args.config)
    except Exception as e:
        print(f"❌ Ошибка чтения {args.config}: {e}")
        sys.exit(1)

    if file_config:
        print(f"📋 Используется конфиг из {args.config}")

    config = (file_config or TypegenConfig()).merge_with_args(args)

    # Инициализация конфига
    if args.init_config:
        config.save_to_file(args.config)
        print(f"✅ Создан конфиг файл {args.config}")
        return

    try:
        run(config)
    except Exception as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)


if __name__ == "__main__":
    generate()
