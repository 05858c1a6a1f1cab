"""Article Word Index dashboard."""

import asyncio
import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from settings import MAX_TOP_WORDS_LIMIT, TOP_WORDS_LIMIT  # noqa: E402
from web.api import articles, words  # noqa: E402
from web.api.errors import ValidationError  # noqa: E402

setup_logging(to_file=False)

# Ensure container is initialized
container.init()

st.set_page_config(page_title="Article Word Index", page_icon="🔎", layout="wide")


def run(coro):
    """Drive an async view from the synchronous script."""
    return asyncio.run(coro)


st.title("Article Word Index")
search_tab, common_tab, top_tab, article_tab = st.tabs(["Find words", "Most common", "Top words", "Add article"])

with search_tab:
    query = st.text_input("Words (space or comma separated)")
    if query:
        terms = [w for w in query.replace(",", " ").split() if w]
        try:
            resp = run(words.find_words(terms))
        except ValidationError as e:
            st.error(e.message)
        else:
            for word, items in resp.words.items():
                st.subheader(word)
                if not items:
                    st.caption("No occurrences")
                    continue
                st.dataframe(
                    [{"article_id": i.article_id, "count": len(i.offsets), "offsets": i.offsets} for i in items],
                    use_container_width=True,
                )

with common_tab:
    word = st.text_input("Word")
    if word:
        try:
            resp = run(words.get_most_common_word(word))
        except ValidationError as e:
            st.error(e.message)
        else:
            if resp is None:
                st.info(f"'{word}' does not occur in any article")
            else:
                st.metric(f"Occurrences of '{resp.word}'", resp.count)
                st.caption(f"Article {resp.article_id}")

with top_tab:
    limit = st.slider("How many", 1, MAX_TOP_WORDS_LIMIT, TOP_WORDS_LIMIT)
    resp = run(words.get_top_words(limit))
    st.dataframe([i.model_dump() for i in resp.items], use_container_width=True)

with article_tab:
    with st.form("article"):
        author = st.text_input("Author")
        content = st.text_area("Content", height=200)
        submitted = st.form_submit_button("Save and index")
    if submitted:
        try:
            created = run(articles.create_article(author, content))
        except ValidationError as e:
            st.error(e.message)
        else:
            logger.info("Article {} created from dashboard", created.id)
            st.success(f"Article {created.id} indexed")
