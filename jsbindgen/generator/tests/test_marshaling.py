import pytest
from jsbindgen.generator.marshaling import MarshalingEmitter, UnsupportedTypeError
from jsbindgen.generator.type_classifier import TypeClassifier
from jsbindgen.symbols import Parameter


@pytest.fixture
def emitter():
    return MarshalingEmitter(TypeClassifier(class_names=['float3', 'Entity'], value_types=['Color']))


class TestGetFromStack:
    def test_double_is_not_cast(self, emitter):
        assert emitter.get_from_stack('double', 0, 'd') == 'double d = duk_require_number(ctx, 0);'

    def test_other_numbers_are_cast(self, emitter):
        assert emitter.get_from_stack('const float&', 1, 'x') == 'float x = (float)duk_require_number(ctx, 1);'
        assert emitter.get_from_stack('unsigned int', 2, 'n') == \
            'unsigned int n = (unsigned int)duk_require_number(ctx, 2);'

    def test_boolean(self, emitter):
        assert emitter.get_from_stack('bool', 0, 'b') == 'bool b = duk_require_boolean(ctx, 0);'

    def test_string_is_constructed(self, emitter):
        assert emitter.get_from_stack('const String&', 0, 's') == 'String s(duk_require_string(ctx, 0));'

    def test_class_with_null_check(self, emitter):
        assert emitter.get_from_stack('float3', 0, 'v', null_check=True) == \
            'float3* v = GetCheckedObject<float3>(ctx, 0, float3_Id);'

    def test_class_without_null_check(self, emitter):
        assert emitter.get_from_stack('float3', 0, 'v') == 'float3* v = GetObject<float3>(ctx, 0, float3_Id);'

    def test_class_pointer(self, emitter):
        assert emitter.get_from_stack('Entity*', 3, 'e', null_check=True) == \
            'Entity* e = GetObject<Entity>(ctx, 3, Entity_Id);'

    @pytest.mark.parametrize('type_name', ['Color', 'char*', 'std::vector<int>', 'Unknown'])
    def test_unsupported_type_raises(self, emitter, type_name):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            emitter.get_from_stack(type_name, 0, 'v')
        assert exc_info.value.type_name == type_name
        assert type_name in str(exc_info.value)

    def test_unsupported_type_error_is_value_error(self, emitter):
        with pytest.raises(ValueError):
            emitter.get_from_stack('Color', 0, 'c')


class TestGetParameter:
    def test_reference_parameter_is_null_checked(self, emitter):
        assert emitter.get_parameter(Parameter('const float3&', 'v'), 0) == \
            'float3* v = GetCheckedObject<float3>(ctx, 0, float3_Id);'

    def test_by_value_parameter_is_null_checked(self, emitter):
        assert 'GetCheckedObject<float3>' in emitter.get_parameter(Parameter('float3', 'v'), 1)

    def test_pointer_parameter_is_not_null_checked(self, emitter):
        assert emitter.get_parameter(Parameter('Entity*', 'e'), 0) == \
            'Entity* e = GetObject<Entity>(ctx, 0, Entity_Id);'


class TestPushToStack:
    def test_number(self, emitter):
        assert emitter.push_to_stack('int', 'ret') == 'duk_push_number(ctx, ret);'

    def test_boolean(self, emitter):
        assert emitter.push_to_stack('bool', 'ret') == 'duk_push_boolean(ctx, ret);'

    def test_string(self, emitter):
        assert emitter.push_to_stack('const String&', 'ret') == 'duk_push_string(ctx, ret.c_str());'

    def test_class_value_is_copied(self, emitter):
        assert emitter.push_to_stack('float3', 'ret') == \
            'PushValueObjectCopy<float3>(ctx, ret, float3_Id, float3_Finalizer);'

    def test_class_pointer_copies_pointee_or_pushes_null(self, emitter):
        assert emitter.push_to_stack('Entity*', 'ret') == \
            'if (ret) PushValueObjectCopy<Entity>(ctx, *ret, Entity_Id, Entity_Finalizer); else duk_push_null(ctx);'

    def test_unsupported_type_raises(self, emitter):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            emitter.push_to_stack('Color', 'ret')
        assert exc_info.value.operation == 'push_to_stack'

    def test_constructor_result(self, emitter):
        assert emitter.push_constructor_result('float3', 'newObj') == \
            'PushConstructorResult<float3>(ctx, newObj, float3_Id, float3_Finalizer);'

    def test_this_object(self, emitter):
        assert emitter.get_this('float3') == 'float3* thisObj = GetThisObject<float3>(ctx, float3_Id);'


class TestArgCheck:
    @pytest.mark.parametrize('type_name, expected', [
        ('float', 'duk_is_number(ctx, 2)'),
        ('bool', 'duk_is_boolean(ctx, 2)'),
        ('const String&', 'duk_is_string(ctx, 2)'),
        ('const float3&', 'GetObject<float3>(ctx, 2, float3_Id)'),
    ])
    def test_predicates(self, emitter, type_name, expected):
        assert emitter.arg_check(Parameter(type_name, 'a'), 2) == expected

    def test_unsupported_type_raises(self, emitter):
        with pytest.raises(UnsupportedTypeError):
            emitter.arg_check(Parameter('Color', 'c'), 0)


class TestDereference:
    @pytest.mark.parametrize('type_name, expected', [
        ('const float3&', True),
        ('float3', True),
        ('Entity*', False),
        ('float', False),
        ('bool', False),
        ('Color', False),
        ('const String&', False),
    ])
    def test_needs_dereference(self, emitter, type_name, expected):
        assert emitter.needs_dereference(Parameter(type_name, 'a')) == expected

    def test_call_arguments(self, emitter):
        params = [Parameter('const float3&', 'v'), Parameter('float', 't'), Parameter('Entity*', 'e')]
        assert emitter.call_arguments(params) == '*v, t, e'

    def test_call_arguments_empty(self, emitter):
        assert emitter.call_arguments([]) == ''


class TestArgumentNames:
    def test_unnamed_parameter_goes_by_position(self, emitter):
        assert emitter.get_parameter(Parameter('float', ''), 1) == 'float arg1 = (float)duk_require_number(ctx, 1);'

    @pytest.mark.parametrize('name', ['ret', 'thisObj', 'newObj', 'numArgs', 'ctx', 'obj'])
    def test_parameter_clashing_with_wrapper_locals_goes_by_position(self, emitter, name):
        assert emitter.get_parameter(Parameter('int', name), 0) == 'int arg0 = (int)duk_require_number(ctx, 0);'

    def test_call_arguments_use_the_same_names(self, emitter):
        params = [Parameter('float', ''), Parameter('const float3&', 'ret'), Parameter('int', 'count')]
        assert emitter.call_arguments(params) == 'arg0, *arg1, count'

    def test_positional_names_are_never_taken_by_declared_names(self, emitter):
        params = [Parameter('float', 'arg1'), Parameter('float', '')]
        assert emitter.call_arguments(params) == 'arg0, arg1'
