#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Number Words Web Demo
Streamlit page for converting integers to English words
"""

import streamlit as st
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from number_words import ConjunctionMode, NumberWordsError, convert, parse_numeral  # noqa: E402

MODE_LABELS = {
    ConjunctionMode.ALWAYS: "all - every group",
    ConjunctionMode.LAST_GROUP_ONLY: "last - last group only",
    ConjunctionMode.BELOW_ONE_THOUSAND_ONLY: "below1k - numbers under 1000 only",
    ConjunctionMode.NONE: "none - never",
}

EXAMPLES = ["234", "92,582,349", "543_953_459_343", "1,000,355", "-678"]

st.set_page_config(page_title="Number Words", page_icon="🔢", layout="centered")

st.markdown(
    """
<style>
    .main-header {
        font-size: 2.2rem;
        font-weight: bold;
        text-align: center;
        margin-bottom: 0.3rem;
    }
    .sub-header {
        text-align: center;
        color: #666;
        font-size: 1rem;
        margin-bottom: 1rem;
    }
</style>
""",
    unsafe_allow_html=True,
)


def main():
    st.markdown('<div class="main-header">🔢 Number Words</div>', unsafe_allow_html=True)
    st.markdown(
        '<div class="sub-header">Integers to English words</div>',
        unsafe_allow_html=True,
    )

    col_input, col_mode = st.columns([1.5, 1])
    with col_input:
        numeral = st.text_input(
            "📝 Number",
            value=EXAMPLES[0],
            help='"," and "_" separators are allowed',
            key="numeral_input",
        )
    with col_mode:
        mode = st.selectbox(
            '🔗 "and" placement',
            list(MODE_LABELS),
            format_func=MODE_LABELS.get,
            key="mode_select",
        )
    minimal = st.checkbox("Minimal output", value=False, key="minimal")

    if not numeral.strip():
        st.info("Enter a number to convert")
        return

    try:
        parsed = parse_numeral(numeral)
        words = convert(parsed.magnitude, parsed.is_negative, mode)
    except NumberWordsError as e:
        st.error(f"❌ {e}")
        return

    st.code(words if minimal else f"{parsed.text}: {words}", language=None)

    with st.expander("💡 Examples"):
        for example in EXAMPLES:
            parsed = parse_numeral(example)
            st.markdown(f"- `{example}`: {convert(parsed.magnitude, parsed.is_negative, mode)}")


main()
