"""Tool registry built on Pydantic v2 models."""

from __future__ import annotations

from collections.abc import Callable
from time import perf_counter
from typing import Any, Literal

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, ConfigDict, Field, create_model

from txtx.types import Category, ToolTrace

ParamType = Literal["string", "integer", "number", "boolean"]

_PYTHON_TYPES: dict[str, type] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
}


class ToolParam(BaseModel):
    """A named option accepted by a tool in addition to its input text."""

    name: str
    type: ParamType = "string"
    description: str = ""
    required: bool = False
    default: Any = None


class ToolSpec(BaseModel):
    """Declarative tool specification for registration and validation."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    id: str
    name: str
    description: str
    category_id: str
    handler: Callable[..., str]
    keywords: list[str] = Field(default_factory=list)
    params: list[ToolParam] = Field(default_factory=list)
    is_generator: bool = False

    @property
    def slug(self) -> str:
        return self.id

    def args_schema(self) -> type[BaseModel]:
        """Build the pydantic model validating an execution payload."""
        fields: dict[str, Any] = {}
        if not self.is_generator:
            fields["input"] = (str, Field(description="Text to transform"))
        for param in self.params:
            python_type = _PYTHON_TYPES[param.type]
            if param.required:
                fields[param.name] = (python_type, Field(description=param.description))
            else:
                fields[param.name] = (
                    python_type | None,
                    Field(default=param.default, description=param.description),
                )
        model_name = "".join(part.capitalize() for part in self.id.split("-")) + "Input"
        return create_model(model_name, **fields)

    def invoke(self, payload: dict[str, Any]) -> str:
        data = self.args_schema().model_validate(payload).model_dump()
        # optional params left unset fall back to the handler's own default
        kwargs = {key: value for key, value in data.items() if value is not None}
        if self.is_generator:
            return self.handler(**kwargs)
        text = kwargs.pop("input")
        return self.handler(text, **kwargs)


class ToolRegistry:
    """Stores categories and tool specs, executes tools, exports LangChain tools."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}
        self._categories: dict[str, Category] = {}
        self._observer: Callable[[ToolTrace], None] | None = None

    def register_category(self, category: Category) -> None:
        if category.id in self._categories:
            raise ValueError(f"Category already registered: {category.id}")
        self._categories[category.id] = category

    def register(self, spec: ToolSpec) -> None:
        if spec.id in self._tools:
            raise ValueError(f"Tool already registered: {spec.id}")
        if self._categories and spec.category_id not in self._categories:
            raise ValueError(f"Unknown category for tool {spec.id}: {spec.category_id}")
        self._tools[spec.id] = spec

    def set_observer(self, observer: Callable[[ToolTrace], None] | None) -> None:
        """Set an optional callback invoked after each tool execution."""
        self._observer = observer

    def all_tools(self) -> list[ToolSpec]:
        return list(self._tools.values())

    def all_categories(self) -> list[Category]:
        return list(self._categories.values())

    def get_category(self, category_id: str) -> Category | None:
        return self._categories.get(category_id)

    def get_category_by_slug(self, slug: str) -> Category | None:
        for category in self._categories.values():
            if category.slug == slug:
                return category
        return None

    def get_tool_by_slug(self, slug: str) -> ToolSpec | None:
        for spec in self._tools.values():
            if spec.slug == slug:
                return spec
        return None

    def get_tool(self, category_slug: str, tool_slug: str) -> ToolSpec | None:
        category = self.get_category_by_slug(category_slug)
        if category is None:
            return None
        spec = self.get_tool_by_slug(tool_slug)
        if spec is None or spec.category_id != category.id:
            return None
        return spec

    def tools_in_category(self, category_id: str) -> list[ToolSpec]:
        return [spec for spec in self._tools.values() if spec.category_id == category_id]

    def categories_with_counts(self) -> list[tuple[Category, int]]:
        return [
            (category, len(self.tools_in_category(category.id)))
            for category in self._categories.values()
        ]

    def execute(self, tool_id: str, payload: dict[str, Any]) -> str:
        spec = self._tools.get(tool_id)
        if spec is None:
            raise KeyError(f"Unknown tool: {tool_id}")
        return self._execute_spec(spec, payload)

    def as_langchain_tools(self) -> list[StructuredTool]:
        tools: list[StructuredTool] = []
        for spec in self._tools.values():
            tools.append(
                StructuredTool.from_function(
                    name=spec.id.replace("-", "_"),
                    description=spec.description,
                    args_schema=spec.args_schema(),
                    func=self._build_function(spec),
                )
            )
        return tools

    def _build_function(self, spec: ToolSpec) -> Callable[..., str]:
        def _callable(**kwargs: Any) -> str:
            return self._execute_spec(spec, kwargs)

        return _callable

    def _execute_spec(self, spec: ToolSpec, payload: dict[str, Any]) -> str:
        start = perf_counter()
        output = spec.invoke(payload)
        latency_ms = (perf_counter() - start) * 1000.0

        if self._observer is not None:
            self._observer(
                ToolTrace(
                    name=spec.id,
                    input_payload=payload,
                    output_preview=output[:320],
                    latency_ms=latency_ms,
                )
            )
        return output
