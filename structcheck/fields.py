import inspect
import operator
import types
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Tuple,
    Union,
    cast,
    get_args,
    get_origin,
    get_type_hints,
)

from .rules import parse_rules

_UNION_TYPES: Tuple[Any, ...] = (Union,)
if hasattr(types, "UnionType"):
    _UNION_TYPES += (types.UnionType,)


# --- Rule Marker ---
class rules:
    """Marker carrying a field's rule declaration in ``Annotated`` metadata.

    Example:
        class User(Record):
            name: Annotated[Optional[str], rules("required,min=3,max=50")]
            age: Annotated[int, rules("min=18,max=100")] = 0
    """

    __slots__ = ("tag",)

    def __init__(self, tag: str) -> None:
        if not isinstance(tag, str):
            raise TypeError("rules tag must be a string.")
        self.tag = tag

    @property
    def tokens(self) -> List[str]:
        return parse_rules(self.tag)

    def __repr__(self) -> str:
        return f"rules({self.tag!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, rules):
            return NotImplemented
        return self.tag == other.tag

    def __hash__(self) -> int:
        return hash(self.tag)


@dataclass(frozen=True)
class FieldSpec:
    """One validated field: how to read it and which rules apply."""

    name: str
    accessor: Callable[[Any], Any]
    rules: Tuple[str, ...]

    def value_of(self, record: Any) -> Any:
        return self.accessor(record)


# --- Type Inspection ---
def _is_union(tp: Any) -> bool:
    return get_origin(tp) in _UNION_TYPES


def find_rules(tp: Any) -> Optional[rules]:
    """Return the rules marker attached to an annotation, if any."""
    if get_origin(tp) is Annotated:
        for meta in get_args(tp)[1:]:
            if isinstance(meta, rules):
                return meta
        return None
    # get_type_hints may wrap ``Annotated[T, ...] = None`` in Optional
    if _is_union(tp):
        for arg in get_args(tp):
            found = find_rules(arg)
            if found is not None:
                return found
    return None


def collect_fields(cls: type) -> List[FieldSpec]:
    """Build the field registry of a class from its type hints.

    Fields come back in declaration order, base classes first. Fields with no
    rules marker, an empty rule declaration, or a leading underscore are left
    out.

    Annotations must be resolvable from the class's module; a forward
    reference that can't be resolved raises TypeError naming the class.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except NameError as e:
        raise TypeError(
            f"Cannot resolve field annotations of {cls.__name__}: {e}"
        ) from e
    except TypeError:
        # not an annotatable class (e.g. a builtin)
        return []

    specs: List[FieldSpec] = []
    for name, tp in hints.items():
        if name.startswith("_"):
            continue
        marker = find_rules(tp)
        if marker is None or not marker.tag:
            continue
        specs.append(
            FieldSpec(
                name=name,
                accessor=operator.attrgetter(name),
                rules=tuple(marker.tokens),
            )
        )
    return specs


def fields_of(record: Any) -> List[FieldSpec]:
    """Field registry for a record instance."""
    cls = type(record)
    registry = cls.__dict__.get("_field_specs")
    if registry is not None:
        return list(registry)
    return collect_fields(cls)


def resolve(value: Any) -> Tuple[bool, Any]:
    """Resolve an optional value into ``(present, value)``."""
    if value is None:
        return False, None
    return True, value


# --- Metaclass ---
class RecordMeta(type):
    """Collects a Record's fields, defaults and rule registry."""

    def __new__(mcls, name: str, bases: tuple, namespace: dict) -> Any:
        fields: List[str] = []
        defaults: Dict[str, Any] = {}
        for base in bases:
            if hasattr(base, "_fields"):
                fields.extend(getattr(base, "_fields"))
            if hasattr(base, "_defaults"):
                defaults.update(getattr(base, "_defaults"))

        cls = super().__new__(mcls, name, bases, namespace)
        cls_any = cast(Any, cls)

        # read after creation: annotations may be evaluated lazily
        for k in inspect.get_annotations(cls):
            if k not in fields:
                fields.append(k)
            if k in namespace:
                defaults[k] = namespace[k]

        cls_any._fields = fields
        cls_any._defaults = defaults
        cls_any._field_specs = tuple(collect_fields(cls))
        return cls


# --- Record Base Class ---
class Record(metaclass=RecordMeta):
    """Base class for records whose rule registry is built once per class."""

    # filled in by RecordMeta; left unannotated so they aren't taken for fields
    _fields = []
    _defaults = {}
    _field_specs = ()

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        total_fields = len(self._fields)

        invalid_fields = [k for k in kwargs if k not in self._fields]
        if invalid_fields:
            raise TypeError(
                f"Invalid field(s) for {self.__class__.__name__}: {', '.join(invalid_fields)}. "  # noqa: E501
                f"Valid fields are: {', '.join(self._fields)}."
            )

        if len(args) + len(kwargs) > total_fields:
            raise TypeError(
                f"Too many arguments for {self.__class__.__name__}. "
                f"Expected at most {total_fields}, got {len(args) + len(kwargs)}."
            )

        assigned_fields: set = set()

        for name, value in zip(self._fields, args):
            setattr(self, name, value)
            assigned_fields.add(name)

        for name, value in kwargs.items():
            if name in assigned_fields:
                raise TypeError(
                    f"Duplicate value for field '{name}' in {self.__class__.__name__}."
                )
            setattr(self, name, value)
            assigned_fields.add(name)

        for name in self._fields:
            if name in assigned_fields:
                continue
            if name not in self._defaults:
                raise TypeError(
                    f"Missing value for field '{name}' of {self.__class__.__name__}. "  # noqa: E501
                    f"Fields: {', '.join(self._fields)}."
                )
            default = self._defaults[name]
            setattr(self, name, default() if callable(default) else default)

    @classmethod
    def field_specs(cls) -> List[FieldSpec]:
        """The validated fields of this record type, in declaration order."""
        return list(cls._field_specs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self._fields)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields_str = ", ".join(f"{f}={getattr(self, f)!r}" for f in self._fields)
        return f"{self.__class__.__name__}({fields_str})"
