from enum import Enum
from typing import Optional, Union, List

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


class FieldType(str, Enum):
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    REFERENCE = "reference"
    ANY_OF = "any_of"
    ARRAY = "array"
    # Только для синтетических объектов: готовое TypeScript выражение
    RAW = "raw"


UNION_OBJECT_TYPES = ("any_of", "oneOf")


class SchemaProperty(BaseModel):
    """Поле объекта, аргумент метода или описание типа"""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    description: str = ""
    required: bool = False
    type: str

    default: Optional[Union[bool, int, float, str]] = None
    enumeration: Optional[List[str]] = None
    reference: Optional[str] = None
    array: Optional["SchemaProperty"] = None
    any_of: Optional[List["SchemaProperty"]] = None

    generic: Optional[str] = None
    expression: Optional[str] = None

    min: Optional[float] = None
    max: Optional[float] = None
    min_len: Optional[int] = None
    max_len: Optional[int] = None

    @field_validator("name", "description", mode="before")
    def none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("enumeration", mode="before")
    def enumeration_to_str(cls, value):
        if value is None:
            return value

        return [str(item) for item in value]


SchemaProperty.model_rebuild()


class SchemaObject(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    description: str = ""
    documentation_link: str = ""

    type: Optional[str] = None
    properties: Optional[List[SchemaProperty]] = None
    any_of: Optional[List[SchemaProperty]] = None

    generic: Optional[str] = None

    @field_validator("description", "documentation_link", mode="before")
    def none_to_empty(cls, value):
        return "" if value is None else value

    @property
    def is_union(self) -> bool:
        return self.type in UNION_OBJECT_TYPES or self.any_of is not None

    def as_union_property(self) -> SchemaProperty:
        """Объект-объединение в виде any_of поля для ремаппера"""
        return SchemaProperty(
            name="",
            description=self.description,
            required=True,
            type=FieldType.ANY_OF.value,
            any_of=self.any_of or [],
        )

    def find_property(self, name: str) -> Optional[SchemaProperty]:
        for prop in self.properties or []:
            if prop.name == name:
                return prop

        return None


class SchemaMethod(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    description: str = ""
    documentation_link: str = ""

    arguments: Optional[List[SchemaProperty]] = Field(
        default=None, validation_alias=AliasChoices("arguments", "parameters")
    )
    return_type: SchemaProperty = Field(
        validation_alias=AliasChoices("return_type", "returns")
    )
    multipart_only: bool = False

    @field_validator("description", "documentation_link", mode="before")
    def none_to_empty(cls, value):
        return "" if value is None else value

    def find_argument(self, name: str) -> Optional[SchemaProperty]:
        for argument in self.arguments or []:
            if argument.name == name:
                return argument

        return None


class SchemaVersion(BaseModel):
    major: int
    minor: int
    patch: int = 0


class RecentChanges(BaseModel):
    day: int
    month: int
    year: int


class BotApiSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    version: SchemaVersion
    recent_changes: RecentChanges
    methods: List[SchemaMethod] = []
    objects: List[SchemaObject] = []

    @model_validator(mode="after")
    def unique_names(self):
        for kind, entities in (("метод", self.methods), ("объект", self.objects)):
            seen = set()
            for entity in entities:
                if entity.name in seen:
                    raise ValueError(f"Повторяющийся {kind}: {entity.name}")
                seen.add(entity.name)

        return self

    def find_method(self, name: str) -> Optional[SchemaMethod]:
        for method in self.methods:
            if method.name == name:
                return method

        return None

    def find_object(self, name: str) -> Optional[SchemaObject]:
        for obj in self.objects:
            if obj.name == name:
                return obj

        return None


class CodeFile(BaseModel):
    file_name: str

    header: list[str] = []
    imports: list[str] = []
    code_blocks: list[str] = []

    @property
    def body(self) -> str:
        """Всё кроме заголовка: детерминировано для одной и той же схемы"""
        return "\n".join(
            filter(
                bool,
                [
                    ("\n".join(self.imports) if self.imports else ""),
                    "\n".join(self.code_blocks),
                ],
            )
        )

    def __str__(self):
        return "\n".join(self.header + [self.body]).rstrip("\n") + "\n"

    def add_code_block(self, code_block: Union[str, list[str]]) -> "CodeFile":
        if isinstance(code_block, list):
            code_block = "\n".join(code_block)

        self.code_blocks.append(code_block)
        return self


class Project(BaseModel):
    name: str
    files: list[CodeFile] = []

    def add_file(self, file_name: Union["CodeFile", str], **kwargs) -> "CodeFile":
        code_file = file_name
        if isinstance(file_name, str):
            code_file = CodeFile(file_name=file_name, **kwargs)

        self.files.append(code_file)
        return code_file

    def get_file(self, file_name: str) -> Optional[CodeFile]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file

        return None
