import logging
from typing import List, Optional

import httpx

from ...config import CURRENCIES_URL
from ..types.errors import CurrencyFetchError

logger = logging.getLogger(__name__)

# Внутренняя валюта Telegram Stars, отсутствует в currencies.json
STARS_CURRENCY = "XTR"


def fetch_currencies(
    url: str = CURRENCIES_URL, client: Optional[httpx.Client] = None
) -> List[str]:
    """
    Загружает коды валют, поддерживаемых платежами.

    currencies.json - объект, ключи которого коды валют; массив кодов
    тоже принимается.

    Raises:
        CurrencyFetchError: если список недоступен, не разобран или пуст
    """
    logger.debug("Загрузка списка валют из %s", url)

    try:
        if client is None:
            response = httpx.get(url)
        else:
            response = client.get(url)
        response.raise_for_status()
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        raise CurrencyFetchError(f"Не удалось загрузить список валют из {url}: {e}") from e

    if isinstance(data, dict):
        currencies = list(data.keys())
    elif isinstance(data, list):
        currencies = [str(code) for code in data]
    else:
        raise CurrencyFetchError(f"Неожиданный формат списка валют: {type(data).__name__}")

    if not currencies:
        raise CurrencyFetchError(f"Пустой список валют из {url}")

    logger.info("Загружено %d валют", len(currencies))
    return currencies
