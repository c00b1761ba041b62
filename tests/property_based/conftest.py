"""
Shared Hypothesis strategies for property-based testing of the checks.
"""
# 说明：属性测试中共享的 Hypothesis 策略集。
# 职责：
# - 按原始类型名生成对应的 Python 值（null/boolean/integer/double/string/array）
# - 生成不重复的原始类型 token 列表

from hypothesis import strategies as st


# ------------------------------------------------------------------ Basic Types
PRIMITIVE_TOKENS = ("null", "boolean", "integer", "double", "string", "array")


def values_of(token):
    # 返回生成指定原始类型值的策略
    return {
        "null": st.none(),
        "boolean": st.booleans(),
        "integer": st.integers(),
        "double": st.floats(allow_nan=True),
        "string": st.text(max_size=20),
        "array": st.one_of(
            st.lists(st.integers(), max_size=5),
            st.dictionaries(st.text(max_size=5), st.integers(), max_size=5),
        ),
    }[token]


@st.composite
def typed_values(draw):
    # 生成 (token, value) 对，value 的原始类型名恰为 token
    token = draw(st.sampled_from(PRIMITIVE_TOKENS))
    return token, draw(values_of(token))


@st.composite
def token_lists(draw):
    # 生成非空且不重复的原始类型 token 列表
    return draw(st.lists(st.sampled_from(PRIMITIVE_TOKENS), min_size=1, max_size=4, unique=True))

