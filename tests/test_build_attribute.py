from bindweaver.builders.attribute import build_attribute
from bindweaver.ir import Container, ContainerType, Type, Variable
from bindweaver.typeinfo import TypeInfo


def test_can_build_simple_attributes():
    v = Variable(name="i")
    info = TypeInfo()
    attribute = build_attribute("Module", v, info)
    assert 'attr("i") = &Module::i' in attribute.pybind()


def test_attribute_type_is_checked():
    v = Variable(name="v", type=Type(kind=Container(ContainerType.VECTOR)))
    info = TypeInfo()
    build_attribute("NS", v, info)
    assert info.includes == {"#include <pybind11/stl.h>"}