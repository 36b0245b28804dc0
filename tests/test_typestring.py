from bindweaver.ir import (
    BaseType,
    Container,
    ContainerType,
    FunctionType,
    Integral,
    Type,
    UserDefined,
    Value,
)
from bindweaver.typestring import (
    base_type_to_string,
    build_type_string,
    container_type_to_string,
)


def int_type():
    return Type(representation="int", kind=Value(BaseType.INT))


def vector_type():
    return Type(
        representation="int",
        kind=Container(ContainerType.VECTOR, [int_type()]),
    )


def map_type():
    return Type(
        representation="int",
        kind=Container(ContainerType.MAP, [int_type(), int_type()]),
    )


def test_base_cases():
    assert build_type_string(int_type()) == "int"
    assert build_type_string(vector_type()) == "vector_int"
    assert build_type_string(map_type()) == "map_int_int"


def test_nested_cases():
    m = map_type()
    m.kind.contained_types[-1] = vector_type()
    assert build_type_string(m) == "map_int_vector_int"


def test_multiple_types():
    t = map_type()
    t.kind.container = ContainerType.TUPLE
    t.kind.contained_types.append(int_type())
    t.kind.contained_types.append(int_type())
    assert build_type_string(t) == "tuple_int_int_int_int"


def test_hidden_allocator_is_skipped():
    allocator = Type(kind=Container(ContainerType.ALLOCATOR, [int_type()]))
    t = Type(kind=Container(ContainerType.VECTOR, [int_type(), allocator]))
    assert build_type_string(t) == "vector_int"


def test_integral_uses_representation():
    three = Type(representation="3", kind=Integral())
    t = Type(kind=Container(ContainerType.ARRAY, [int_type(), three]))
    assert build_type_string(t) == "array_int_3"


def test_user_defined_and_function():
    ud = Type(kind=UserDefined("MyClass"))
    fn = Type(kind=FunctionType("std::function<void()>"))
    assert build_type_string(ud) == "MyClass"
    assert build_type_string(fn) == "f"
    t = Type(kind=Container(ContainerType.MAP, [ud, fn]))
    assert build_type_string(t) == "map_MyClass_f"


def test_name_tables():
    assert base_type_to_string(BaseType.FILESYSTEM_PATH) == "string"
    assert base_type_to_string(BaseType.UNSIGNED_LONG_INT) == "unsignedlongint"
    assert container_type_to_string(ContainerType.UNORDERED_MAP) == "unorderedmap"
    assert container_type_to_string(ContainerType.HASH) == ""