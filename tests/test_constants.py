"""Tests for the builtin constant macros."""

import copy

import pytest

from dmfront.builtins import BUILTIN_CONSTANTS, default_defines
from dmfront.lexer import Token, TokenType
from dmfront.preprocessor import ConstantDefine, FunctionDefine


class TestDefaultDefines:
    """Tests for default_defines()."""

    def test_true_and_false(self, defines):
        """TRUE and FALSE expand to a single integer token."""
        assert defines['TRUE'].subst == [Token(TokenType.INT, 1)]
        assert defines['FALSE'].subst == [Token(TokenType.INT, 0)]

    def test_every_constant_is_registered(self, defines):
        assert set(defines) == set(BUILTIN_CONSTANTS)

    def test_all_constants_are_single_token(self, defines):
        for name, define in defines.items():
            assert isinstance(define, ConstantDefine), name
            assert len(define.subst) == 1, name

    @pytest.mark.parametrize("name,value", [
        ('DM_VERSION', 511),
        ('NORTH', 1),
        ('SOUTHWEST', 10),
        ('FLOAT_LAYER', -1),
        ('BACKGROUND_LAYER', 20000),
        ('ICON_UNDERLAY', 6),
        ('BLEND_MULTIPLY', 4),
        ('SEE_BLACKNESS', 1024),
        ('PIXEL_SCALE', 512),
        ('TILED_ICON_MAP', 32768),
        ('EDGE_PERSPECTIVE', 2),
    ])
    def test_integer_constants(self, defines, name, value):
        token = defines[name].subst[0]
        assert token.type == TokenType.INT
        assert token.value == value

    @pytest.mark.parametrize("name,value", [
        ('MS_WINDOWS', "MS Windows"),
        ('UNIX', "UNIX"),
        ('MALE', "male"),
        ('PLURAL', "plural"),
    ])
    def test_string_constants(self, defines, name, value):
        token = defines[name].subst[0]
        assert token.type == TokenType.STRING
        assert token.value == value

    def test_second_call_changes_nothing(self, defines):
        before = copy.deepcopy(defines)
        default_defines(defines)
        assert defines == before

    def test_overwrites_user_definition(self):
        """Builtin names are overwritten; unrelated names are kept."""
        defines = {
            'TRUE': ConstantDefine.of(Token.integer(42)),
            'MY_FLAG': ConstantDefine.of(Token.integer(7)),
        }
        default_defines(defines)
        assert defines['TRUE'].subst == [Token.integer(1)]
        assert defines['MY_FLAG'].subst == [Token.integer(7)]


class TestDefineTypes:
    """Tests for the define variants."""

    def test_function_define_is_distinct_from_constant(self):
        define = FunctionDefine(subst=[Token(TokenType.IDENT, 'x')], params=['x'])
        assert define != ConstantDefine(subst=[Token(TokenType.IDENT, 'x')])
        assert repr(define) == "FunctionDefine((x), [Token(IDENT, 'x', 0:0)])"

    def test_variadic_repr(self):
        define = FunctionDefine(params=['fmt'], variadic=True)
        assert repr(define) == "FunctionDefine((fmt, ...), [])"
