from datetime import datetime
from typing import List

from ..types.models import RecentChanges, SchemaVersion

GENERATORS_NOTE = (
    "using [types](https://github.com/gramiojs/types)"
    " and [schema](https://ark0f.github.io/tg-bot-api) generators"
)


class Templates:
    """Шаблоны для генерации файлов"""

    objects_description = (
        "This module contains [Objects](https://core.telegram.org/bots/api#available-types)"
        " with the `{prefix}` prefix"
    )
    objects_example = [
        "@example import object",
        "```typescript",
        'import { {prefix}User } from "@gramio/types/objects";',
        "```",
    ]
    objects_imports = [
        'import type { APIMethods } from "./methods"',
        'import type { APIMethodReturn } from "./utils"',
    ]

    params_description = (
        "This module contains params for [methods](https://core.telegram.org/bots/api#available-methods)"
        " with the `Params` postfix"
    )
    params_example = [
        "@example import params",
        "```typescript",
        'import { SendMessageParams } from "@gramio/types/params";',
        "```",
    ]
    params_imports = [
        'import type { APIMethods } from "./methods"',
        'import type * as Objects from "./objects"',
    ]

    methods_description = (
        "This module contains [API methods](https://core.telegram.org/bots/api#available-methods)"
        " types (functions map with input/output)"
    )
    methods_example = [
        "@example import API methods map",
        "```typescript",
        'import { APIMethods } from "@gramio/types/methods";',
        "",
        'type SendMessageReturn = Awaited<ReturnType<APIMethods["sendMessage"]>>;',
        '//   ^? type SendMessageReturn = {prefix}Message"',
        "```",
    ]
    methods_imports = [
        "import type {",
        "    CallAPIWithOptionalParams,",
        "    CallAPI,",
        "    CallAPIWithoutParams,",
        '} from "./utils"',
        'import type * as Params from "./params"',
        'import type * as Objects from "./objects"',
    ]

    utils_description = "This module contains type-utils for convenient work"
    utils_example = [
        "@example import utils",
        "```typescript",
        'import { APIMethodParams, APIMethodReturn } from "@gramio/types/utils";',
        "",
        'type SendMessageReturn = APIMethodReturn<"sendMessage">;',
        '//   ^? type SendMessageReturn = {prefix}Message"',
        'type SendMessageParams = APIMethodParams<"sendMessage">;',
        '//   ^? type SendMessageParams = SendMessageParams"',
        "```",
    ]
    utils_imports = ['import type { APIMethods } from "./methods"']
    utils = """export type CallAPI<T, R> = (params: T) => Promise<R>
export type CallAPIWithoutParams<R> = () => Promise<R>
export type CallAPIWithOptionalParams<T, R> = (params?: T) => Promise<R>

/**
 * @example
 * ```typescript
 * type SendMessageParams = APIMethodParams<"sendMessage">;
 * //   ^? type SendMessageParams = SendMessageParams"
 * ```
 */
export type APIMethodParams<APIMethod extends keyof APIMethods> = Parameters<
    APIMethods[APIMethod]
>[0]
/**
 * @example
 * ```typescript
 * type SendMessageReturn = APIMethodReturn<"sendMessage">;
 * //   ^? type SendMessageReturn = {prefix}Message"
 * ```
 */
export type APIMethodReturn<APIMethod extends keyof APIMethods> = Awaited<
    ReturnType<APIMethods[APIMethod]>
>"""

    index_description = (
        "This module re-export another modules"
        " (+ export params as {prefix}Params/objects as {prefix}Objects)"
    )
    index_example = [
        "@example import",
        "```typescript",
        'import { {prefix}User, SendMessageParams, APIMethods, APIMethodReturn } from "@gramio/types";',
        "```",
    ]
    index = """export type * from "./methods"
export type * from "./params"
export type * as {prefix}Params from "./params"
export type * from "./objects"
export type * as {prefix}Objects from "./objects"
export type { APIMethodParams, APIMethodReturn } from "./utils"
"""


templates = Templates()


def generate_header(
    version: SchemaVersion,
    recent_changes: RecentChanges,
    description: str,
    additional: List[str],
    generated_at: datetime,
) -> List[str]:
    """JSDoc заголовок модуля с версией схемы и временем генерации"""
    lines = ["/**", " * @module", " *", f" * {description}", " *"]

    if additional:
        lines.extend(f" * {line}".rstrip() for line in additional)
        lines.append(" *")

    released = (
        f"{recent_changes.day:02d}.{recent_changes.month:02d}.{recent_changes.year}"
    )
    lines.extend(
        [
            f" * Based on Bot API v{version.major}.{version.minor}.{version.patch}"
            f" ({released})",
            " *",
            f" * Generated at {generated_at:%d.%m.%Y, %H:%M:%S} {GENERATORS_NOTE}",
            " */",
            "",
        ]
    )

    return lines
