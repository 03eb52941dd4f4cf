"""Validación y transformación de respuestas.

`TypeSchema` envuelve un tipo de wire (modelo, lista de modelos o unión
etiquetada) y ofrece tres entradas que aceptan exactamente los mismos
payloads:

- `validate`: devuelve `ValidationSuccess | ValidationFailure`.
- `parse`: devuelve el valor o lanza `ValidationError`.
- `is_valid`: guarda booleana.

El motor es Pydantic: los modelos son cerrados y estrictos, los errores se
acumulan todos (no solo el primero) con rutas calificadas, y el renombrado
wire -> dominio sale de la tabla de alias de cada modelo.
"""

from __future__ import annotations

import types
from dataclasses import replace
from functools import cached_property, lru_cache
from typing import Annotated, Any, Callable, Generic, Iterable, Literal, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.domain.errors import ValidationError
from core.domain.rules import (
    FieldKind,
    StringFormat,
    ValidationFailure,
    ValidationIssue,
    ValidationOutcome,
    ValidationRule,
    ValidationSuccess,
)
from core.domain.wire import FilePart
from core.logger import logger

T = TypeVar("T")

_NONE_TYPE = type(None)


def _format_loc(loc: Iterable[Any]) -> str:
    return ".".join(str(part) for part in loc)


def issues_from(
    exc: PydanticValidationError, rule: ValidationRule | None = None
) -> tuple[ValidationIssue, ...]:
    """Convierte los errores de Pydantic en problemas con ruta `a.0.b`.

    Con la regla raíz, la ruta se recorre sobre el árbol de reglas y pierde
    los segmentos que Pydantic añade por cada miembro de una unión (la
    etiqueta `book` en `media.book.author`, `bytes` en `file.bytes`).
    """

    return tuple(
        ValidationIssue(
            path=_format_loc(_field_loc(err["loc"], rule) if rule is not None else err["loc"]),
            message=err["msg"],
        )
        for err in exc.errors(include_url=False)
    )


def _rule_for(annotation: Any, metadata: list[Any], *, name: str, wire_name: str) -> ValidationRule:
    origin = get_origin(annotation)

    if origin is Annotated:
        base, *extra = get_args(annotation)
        return _rule_for(base, [*metadata, *extra], name=name, wire_name=wire_name)

    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not _NONE_TYPE]
        if len(args) == 1:
            return replace(
                _rule_for(args[0], metadata, name=name, wire_name=wire_name),
                required=False,
            )
        if set(args) <= {bytes, FilePart}:
            return ValidationRule(name=name, wire_name=wire_name, kind=FieldKind.BINARY)
        if all(isinstance(arg, type) and issubclass(arg, BaseModel) for arg in args):
            return ValidationRule(
                name=name, wire_name=wire_name, kind=FieldKind.UNION, variants=tuple(args)
            )
        if set(args) <= {int, float}:
            return ValidationRule(name=name, wire_name=wire_name, kind=FieldKind.NUMBER)
        return ValidationRule(name=name, wire_name=wire_name, kind=FieldKind.ANY)

    if origin is Literal:
        return ValidationRule(
            name=name,
            wire_name=wire_name,
            kind=FieldKind.ENUM,
            literals=tuple(str(v) for v in get_args(annotation)),
        )

    if origin is list:
        (item,) = get_args(annotation) or (Any,)
        return ValidationRule(
            name=name,
            wire_name=wire_name,
            kind=FieldKind.ARRAY,
            item=_rule_for(item, [], name=name, wire_name=wire_name),
        )

    if origin is dict:
        args = get_args(annotation)
        value_type = args[1] if len(args) == 2 else Any
        return ValidationRule(
            name=name,
            wire_name=wire_name,
            kind=FieldKind.MAP,
            item=_rule_for(value_type, [], name=name, wire_name=wire_name),
        )

    if isinstance(annotation, type):
        if issubclass(annotation, BaseModel):
            return ValidationRule(
                name=name, wire_name=wire_name, kind=FieldKind.OBJECT, nested=annotation
            )
        if issubclass(annotation, (bytes, FilePart)):
            return ValidationRule(name=name, wire_name=wire_name, kind=FieldKind.BINARY)
        # bool antes que int: bool es subclase de int.
        if issubclass(annotation, bool):
            return ValidationRule(name=name, wire_name=wire_name, kind=FieldKind.BOOLEAN)
        if issubclass(annotation, int):
            return ValidationRule(name=name, wire_name=wire_name, kind=FieldKind.INTEGER)
        if issubclass(annotation, float):
            return ValidationRule(name=name, wire_name=wire_name, kind=FieldKind.NUMBER)
        if issubclass(annotation, str):
            fmt = next((m for m in metadata if isinstance(m, StringFormat)), None)
            return ValidationRule(
                name=name, wire_name=wire_name, kind=FieldKind.STRING, format=fmt
            )

    return ValidationRule(name=name, wire_name=wire_name, kind=FieldKind.ANY)


@lru_cache(maxsize=None)
def describe_rules(model: type[BaseModel]) -> tuple[ValidationRule, ...]:
    """Reglas de un modelo, en el orden de declaración de sus campos.

    El atributo es el nombre de dominio; el alias de validación, el de wire.
    """

    rules: list[ValidationRule] = []
    for attr, info in model.model_fields.items():
        if isinstance(info.validation_alias, str):
            wire_name = info.validation_alias
        else:
            wire_name = info.alias or attr
        rule = _rule_for(info.annotation, list(info.metadata), name=attr, wire_name=wire_name)
        rules.append(replace(rule, required=info.is_required()))
    return tuple(rules)


def _literal_matches(model: type[BaseModel], data: dict[str, Any]) -> bool:
    for rule in describe_rules(model):
        if rule.kind is FieldKind.ENUM and rule.name in data:
            if data[rule.name] not in rule.literals:
                return False
    return True


def _rename_object(model: type[BaseModel], data: Any) -> Any:
    if not isinstance(data, dict):
        return data
    by_domain = {rule.name: rule for rule in describe_rules(model)}
    out: dict[str, Any] = {}
    for key, value in data.items():
        rule = by_domain.get(key)
        if rule is None:
            # Desconocido: se deja tal cual para que la validación lo rechace.
            out[key] = value
            continue
        out[rule.wire_name] = _rename_value(rule, value)
    return out


def _rename_value(rule: ValidationRule, value: Any) -> Any:
    """Dominio -> wire, en una sola pasada recursiva sobre las reglas."""

    if value is None:
        return value
    if rule.kind is FieldKind.OBJECT and rule.nested is not None:
        return _rename_object(rule.nested, value)
    if rule.kind is FieldKind.ARRAY and rule.item is not None and isinstance(value, list):
        return [_rename_value(rule.item, v) for v in value]
    if rule.kind is FieldKind.MAP and rule.item is not None and isinstance(value, dict):
        return {k: _rename_value(rule.item, v) for k, v in value.items()}
    if rule.kind is FieldKind.UNION and isinstance(value, dict):
        for variant in rule.variants:
            known = {r.name for r in describe_rules(variant)}
            if set(value) <= known and _literal_matches(variant, value):
                return _rename_object(variant, value)
    return value


def _variant_for_tag(rule: ValidationRule, tag: Any) -> ValidationRule | None:
    # Pydantic etiqueta cada miembro por el valor del discriminador o por el nombre de la clase.
    for variant in rule.variants:
        if tag == variant.__name__ or any(
            r.kind is FieldKind.ENUM and r.literals == (str(tag),) for r in describe_rules(variant)
        ):
            return ValidationRule(name="", wire_name="", kind=FieldKind.OBJECT, nested=variant)
    return None


def _field_loc(loc: Iterable[Any], rule: ValidationRule) -> list[Any]:
    """Ruta de un error en segmentos de campo e índice, sin etiquetas de unión."""

    path: list[Any] = []
    current: ValidationRule | None = rule
    for part in loc:
        if current is None or current.kind is FieldKind.ANY:
            path.append(part)
            continue
        if current.kind is FieldKind.OBJECT and current.nested is not None:
            path.append(part)
            current = next(
                (r for r in describe_rules(current.nested) if r.wire_name == part), None
            )
        elif current.kind in (FieldKind.ARRAY, FieldKind.MAP):
            path.append(part)
            current = current.item
        elif current.kind is FieldKind.UNION:
            variant = _variant_for_tag(current, part)
            if variant is None:
                path.append(part)
            current = variant
        # En una hoja solo quedan etiquetas de miembros (`bytes`, `FilePart`).
    return path


class TypeSchema(Generic[T]):
    """Schema de validación de un tipo de wire."""

    def __init__(self, tp: Any, *, name: str | None = None) -> None:
        self.type = tp
        self.name = name or getattr(tp, "__name__", repr(tp))
        if isinstance(tp, type) and issubclass(tp, BaseModel):
            self._adapter: TypeAdapter[T] = TypeAdapter(tp)
        else:
            self._adapter = TypeAdapter(tp, config=ConfigDict(strict=True))

    def __repr__(self) -> str:
        return f"TypeSchema({self.name})"

    @cached_property
    def root_rule(self) -> ValidationRule:
        return _rule_for(self.type, [], name="", wire_name="")

    @cached_property
    def rules(self) -> tuple[ValidationRule, ...]:
        if isinstance(self.type, type) and issubclass(self.type, BaseModel):
            return describe_rules(self.type)
        return ()

    @property
    def renames(self) -> dict[str, str]:
        """Tabla wire -> dominio de los campos que cambian de nombre."""

        return {rule.wire_name: rule.name for rule in self.rules if rule.renamed}

    def validate(self, data: Any) -> ValidationOutcome[T]:
        try:
            value = self._adapter.validate_python(data)
        except PydanticValidationError as exc:
            return ValidationFailure(errors=issues_from(exc, self.root_rule), raw=data)
        return ValidationSuccess(value=value, data=self.to_domain(value))

    def parse(self, data: Any) -> T:
        outcome = self.validate(data)
        if isinstance(outcome, ValidationFailure):
            raise ValidationError(outcome.errors, data)
        return outcome.value

    def is_valid(self, data: Any) -> bool:
        return self.validate(data).success

    def brand(self, value: T) -> T:
        """Marca nominal sin coste: devuelve el mismo objeto, sin validar.

        Solo para valores que ya pasaron por `parse`/`validate`.
        """

        return value

    def to_domain(self, value: T) -> Any:
        return self._adapter.dump_python(value, by_alias=False, exclude_unset=True)

    def to_wire(self, value: T) -> Any:
        return self._adapter.dump_python(value, by_alias=True, exclude_unset=True)

    def from_domain(self, data: Any) -> ValidationOutcome[T]:
        """Valida un objeto con forma de dominio (renombra y valida)."""

        return self.validate(_rename_value(self.root_rule, data))


def validate_request(data: Any, schema: TypeSchema[T]) -> T:
    """Valida el payload antes de enviarlo."""

    return schema.parse(data)


def validate_response(data: Any, schema: TypeSchema[T]) -> T:
    """Valida el cuerpo recibido; registra el fallo antes de propagarlo."""

    outcome = schema.validate(data)
    if isinstance(outcome, ValidationFailure):
        logger.warning(
            "response validation failed for %s: %s", schema.name, "; ".join(outcome.messages())
        )
        raise ValidationError(outcome.errors, data)
    return outcome.value


def lazy_validator(factory: Callable[[], TypeSchema[T]]) -> Callable[[Any], T]:
    """Construye el schema en la primera validación y lo reutiliza."""

    schema: TypeSchema[T] | None = None

    def _validate(data: Any) -> T:
        nonlocal schema
        if schema is None:
            schema = factory()
        return schema.parse(data)

    return _validate
