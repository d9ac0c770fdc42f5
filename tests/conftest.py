from copy import deepcopy

import httpx
import pytest

from telegram_typegen.internal.parser.schema import SchemaParser

ICON_COLOR_DESCRIPTION = (
    "Color of the topic icon in RGB format. Currently, must be one of "
    "7322096 (0x6FB9F0), 16766590 (0xFFD67E), 13338331 (0xCB86DB), "
    "9367192 (0x8EEE98), 16749490 (0xFF93B2), or 16478047 (0xFB6F5F)"
)

SAMPLE_SCHEMA = {
    "version": {"major": 7, "minor": 10, "patch": 0},
    "recent_changes": {"year": 2024, "month": 9, "day": 6},
    "methods": [
        {
            "name": "getUpdates",
            "description": "Use this method to receive incoming updates using long polling.",
            "documentation_link": "https://core.telegram.org/bots/api/#getupdates",
            "arguments": [
                {"name": "offset", "description": "Identifier of the first update", "required": False, "type": "integer"},
                {
                    "name": "allowed_updates",
                    "description": "A JSON-serialized list of the update types",
                    "required": False,
                    "type": "array",
                    "array": {"type": "string"},
                },
            ],
            "return_type": {"type": "array", "array": {"type": "reference", "reference": "Update"}},
        },
        {
            "name": "getMe",
            "description": "A simple method for testing your bot's authentication token.",
            "documentation_link": "https://core.telegram.org/bots/api/#getme",
            "return_type": {"type": "reference", "reference": "User"},
        },
        {
            "name": "sendMessage",
            "description": "Use this method to send text messages.",
            "documentation_link": "https://core.telegram.org/bots/api/#sendmessage",
            "arguments": [
                {
                    "name": "chat_id",
                    "description": "Unique identifier for the target chat",
                    "required": True,
                    "type": "any_of",
                    "any_of": [{"type": "integer"}, {"type": "string"}],
                },
                {
                    "name": "text",
                    "description": "Text of the message to be sent, 1-4096 characters after entities parsing",
                    "required": True,
                    "type": "string",
                },
                {"name": "parse_mode", "description": "Mode for parsing entities", "required": False, "type": "string"},
                {
                    "name": "reply_markup",
                    "description": "Additional interface options",
                    "required": False,
                    "type": "any_of",
                    "any_of": [
                        {"type": "reference", "reference": "InlineKeyboardMarkup"},
                        {"type": "reference", "reference": "ForceReply"},
                    ],
                },
            ],
            "return_type": {"type": "reference", "reference": "Message"},
        },
        {
            "name": "sendChatAction",
            "description": "Use this method when you need to tell the user that something is happening.",
            "documentation_link": "https://core.telegram.org/bots/api/#sendchataction",
            "arguments": [
                {"name": "chat_id", "description": "Unique identifier for the target chat", "required": True, "type": "integer"},
                {
                    "name": "action",
                    "description": "Type of action to broadcast",
                    "required": True,
                    "type": "string",
                    "enumeration": ["typing", "upload_photo", "record_video"],
                },
            ],
            "return_type": {"type": "bool", "default": True, "required": True},
        },
        {
            "name": "sendMediaGroup",
            "description": "Use this method to send a group of photos as an album.",
            "documentation_link": "https://core.telegram.org/bots/api/#sendmediagroup",
            "arguments": [
                {"name": "chat_id", "description": "Unique identifier for the target chat", "required": True, "type": "integer"},
                {
                    "name": "media",
                    "description": "A JSON-serialized array describing messages to be sent",
                    "required": True,
                    "type": "array",
                    "array": {"type": "reference", "reference": "InputMediaPhoto"},
                },
            ],
            "return_type": {"type": "bool"},
        },
        {
            "name": "deleteWebhook",
            "description": "Use this method to remove webhook integration.",
            "documentation_link": "https://core.telegram.org/bots/api/#deletewebhook",
            "arguments": [
                {"name": "drop_pending_updates", "description": "Pass True to drop all pending updates", "required": False, "type": "bool"},
            ],
            "return_type": {"type": "bool", "default": True, "required": True},
        },
        {
            "name": "createForumTopic",
            "description": "Use this method to create a topic in a forum supergroup chat.",
            "documentation_link": "https://core.telegram.org/bots/api/#createforumtopic",
            "arguments": [
                {"name": "chat_id", "description": "Unique identifier for the target chat", "required": True, "type": "integer"},
                {"name": "name", "description": "Topic name, 1-128 characters", "required": True, "type": "string"},
                {"name": "icon_color", "description": ICON_COLOR_DESCRIPTION, "required": False, "type": "integer"},
            ],
            "return_type": {"type": "reference", "reference": "ForumTopic"},
        },
    ],
    "objects": [
        {
            "name": "Update",
            "description": "This object represents an incoming update.",
            "documentation_link": "https://core.telegram.org/bots/api/#update",
            "type": "properties",
            "properties": [
                {"name": "update_id", "description": "The update's unique identifier.", "required": True, "type": "integer"},
                {"name": "message", "description": "Optional. New incoming message", "required": False, "type": "reference", "reference": "Message"},
            ],
        },
        {
            "name": "User",
            "description": "This object represents a Telegram user or bot.",
            "documentation_link": "https://core.telegram.org/bots/api/#user",
            "type": "properties",
            "properties": [
                {"name": "id", "description": "Unique identifier for this user or bot.", "required": True, "type": "integer"},
                {"name": "is_bot", "description": "True, if this user is a bot", "required": True, "type": "bool"},
            ],
        },
        {
            "name": "Chat",
            "description": "This object represents a chat.",
            "documentation_link": "https://core.telegram.org/bots/api/#chat",
            "type": "properties",
            "properties": [
                {"name": "id", "description": "Unique identifier for this chat.", "required": True, "type": "integer"},
                {
                    "name": "type",
                    "description": "Type of the chat",
                    "required": True,
                    "type": "string",
                    "enumeration": ["private", "group", "supergroup", "channel"],
                },
            ],
        },
        {
            "name": "Message",
            "description": "This object represents a message.",
            "documentation_link": "https://core.telegram.org/bots/api/#message",
            "type": "properties",
            "properties": [
                {"name": "message_id", "description": "Unique message identifier", "required": True, "type": "integer"},
                {"name": "chat", "description": "Chat the message belongs to", "required": True, "type": "reference", "reference": "Chat"},
                {"name": "text", "description": "Optional. For text messages, the actual UTF-8 text", "required": False, "type": "string"},
                {
                    "name": "entities",
                    "description": "Optional. Special entities that appear in the text",
                    "required": False,
                    "type": "array",
                    "array": {"type": "reference", "reference": "MessageEntity"},
                },
                {
                    "name": "reply_markup",
                    "description": "Optional. Inline keyboard attached to the message.",
                    "required": False,
                    "type": "reference",
                    "reference": "InlineKeyboardMarkup",
                },
            ],
        },
        {
            "name": "InaccessibleMessage",
            "description": "This object describes a message that was deleted or is otherwise inaccessible to the bot.",
            "documentation_link": "https://core.telegram.org/bots/api/#inaccessiblemessage",
            "type": "properties",
            "properties": [
                {"name": "date", "description": "Always 0.", "required": True, "type": "integer"},
            ],
        },
        {
            "name": "MaybeInaccessibleMessage",
            "description": "This object describes a message that can be inaccessible to the bot.",
            "documentation_link": "https://core.telegram.org/bots/api/#maybeinaccessiblemessage",
            "type": "any_of",
            "any_of": [
                {"type": "reference", "reference": "Message"},
                {"type": "reference", "reference": "InaccessibleMessage"},
            ],
        },
        {
            "name": "MessageEntity",
            "description": "This object represents one special entity in a text message.",
            "documentation_link": "https://core.telegram.org/bots/api/#messageentity",
            "type": "properties",
            "properties": [
                {
                    "name": "type",
                    "description": "Type of the entity.",
                    "required": True,
                    "type": "string",
                    "enumeration": ["mention", "hashtag", "bold"],
                },
                {"name": "offset", "description": "Offset in UTF-16 code units", "required": True, "type": "integer"},
            ],
        },
        {
            "name": "ForumTopic",
            "description": "This object represents a forum topic.",
            "documentation_link": "https://core.telegram.org/bots/api/#forumtopic",
            "type": "properties",
            "properties": [
                {"name": "message_thread_id", "description": "Unique identifier of the forum topic", "required": True, "type": "integer"},
                {"name": "icon_color", "description": "Color of the topic icon in RGB format", "required": True, "type": "integer"},
            ],
        },
        {
            "name": "ForumTopicClosed",
            "description": "This object represents a service message about a forum topic closed in the chat. Currently holds no information.",
            "documentation_link": "https://core.telegram.org/bots/api/#forumtopicclosed",
            "type": "unknown",
        },
        {
            "name": "InlineKeyboardMarkup",
            "description": "This object represents an inline keyboard.",
            "documentation_link": "https://core.telegram.org/bots/api/#inlinekeyboardmarkup",
            "type": "properties",
            "properties": [
                {
                    "name": "inline_keyboard",
                    "description": "Array of button rows",
                    "required": True,
                    "type": "array",
                    "array": {"type": "array", "array": {"type": "reference", "reference": "InlineKeyboardButton"}},
                },
            ],
        },
        {
            "name": "InlineKeyboardButton",
            "description": "This object represents one button of an inline keyboard.",
            "documentation_link": "https://core.telegram.org/bots/api/#inlinekeyboardbutton",
            "type": "properties",
            "properties": [
                {"name": "text", "description": "Label text on the button", "required": True, "type": "string"},
            ],
        },
        {
            "name": "ForceReply",
            "description": "Upon receiving a message with this object, Telegram clients will display a reply interface to the user.",
            "documentation_link": "https://core.telegram.org/bots/api/#forcereply",
            "type": "properties",
            "properties": [
                {"name": "force_reply", "description": "Shows reply interface to the user", "required": True, "type": "bool", "default": True},
            ],
        },
        {
            "name": "InputMediaPhoto",
            "description": "Represents a photo to be sent.",
            "documentation_link": "https://core.telegram.org/bots/api/#inputmediaphoto",
            "type": "properties",
            "properties": [
                {"name": "type", "description": "Type of the result, must be photo", "required": True, "type": "string", "default": "photo"},
                {"name": "media", "description": "File to send.", "required": True, "type": "string"},
                {
                    "name": "caption",
                    "description": "Optional. Caption of the photo to be sent, 0-1024 characters after entities parsing",
                    "required": False,
                    "type": "string",
                },
                {"name": "parse_mode", "description": "Optional. Mode for parsing entities in the photo caption.", "required": False, "type": "string"},
            ],
        },
        {
            "name": "InputFile",
            "description": "This object represents the contents of a file to be uploaded.",
            "documentation_link": "https://core.telegram.org/bots/api/#inputfile",
            "type": "unknown",
        },
        {
            "name": "Invoice",
            "description": "This object contains basic information about an invoice.",
            "documentation_link": "https://core.telegram.org/bots/api/#invoice",
            "type": "properties",
            "properties": [
                {"name": "currency", "description": "Three-letter ISO 4217 currency code", "required": True, "type": "string"},
                {"name": "total_amount", "description": "Total price in the smallest units of the currency", "required": True, "type": "integer"},
            ],
        },
        {
            "name": "ResponseParameters",
            "description": "Describes why a request was unsuccessful.",
            "documentation_link": "https://core.telegram.org/bots/api/#responseparameters",
            "type": "properties",
            "properties": [
                {"name": "retry_after", "description": "Optional. Seconds left to wait", "required": False, "type": "integer"},
            ],
        },
    ],
}

CURRENCIES = ["AED", "EUR", "USD"]


@pytest.fixture
def schema_dict():
    return deepcopy(SAMPLE_SCHEMA)


@pytest.fixture
def schema(schema_dict):
    return SchemaParser(schema_dict).parse()


@pytest.fixture
def currencies():
    return list(CURRENCIES)


@pytest.fixture
def currencies_client():
    """httpx клиент, отдающий currencies.json без сети"""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={code: {"code": code, "exp": 2} for code in CURRENCIES}
        )

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        yield client
