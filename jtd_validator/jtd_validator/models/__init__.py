from .schema import (
    DiscriminatorForm,
    ElementsForm,
    EmptyForm,
    EnumForm,
    Form,
    PropertiesForm,
    RefForm,
    Schema,
    TypeForm,
    TypeKind,
    ValuesForm,
    walk_schema,
)
