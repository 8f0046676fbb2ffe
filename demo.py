# demo.py
from dataclasses import replace

import streamlit as st

from lachow_leads import config
from lachow_leads.csv_export import UTF8_BOM, generate_csv_filename, leads_to_csv
from lachow_leads.dedupe import deduplicate_leads
from lachow_leads.filtering import category_breakdown, filter_leads, leads_to_dataframe
from lachow_leads.io import load_leads_csv
from lachow_leads.queries import DEFAULT_SEARCH_QUERIES, enabled_queries, make_custom_query
from lachow_leads.search import batch_scrape_leads
from lachow_leads.sheets import export_to_google_sheets
from lachow_leads.types import Confidence, LeadCategory

config.configure_logging()

# ----------------------------
# Page config (ONLY ONCE)
# ----------------------------
st.set_page_config(
    page_title="LaChow - LinkedIn Lead Scraper",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(
    """
<style>
#MainMenu {visibility: hidden;}
footer {visibility: hidden;}
div[data-testid="stButton"] > button {
  width: 100%;
  border-radius: 14px !important;
  font-weight: 700 !important;
}
</style>
""",
    unsafe_allow_html=True,
)


# ----------------------------
# Helpers
# ----------------------------
def _ensure_state():
    if "leads" not in st.session_state:
        st.session_state["leads"] = []
    if "queries" not in st.session_state:
        st.session_state["queries"] = [replace(q) for q in DEFAULT_SEARCH_QUERIES]


def _add_leads(new_leads: list):
    st.session_state["leads"] = deduplicate_leads(st.session_state["leads"], new_leads)


_ensure_state()

# ----------------------------
# Sidebar: scraper config
# ----------------------------
with st.sidebar:
    st.header("Scraper")
    api_key = st.text_input("SerpAPI key", value=config.SERPAPI_KEY, type="password")
    per_query = st.slider("Results per query", 5, config.MAX_RESULTS_PER_QUERY, config.RESULTS_PER_QUERY, step=5)

    st.caption("Queries")
    for q in st.session_state["queries"]:
        q.enabled = st.checkbox(f"{q.label} ({q.category.label})", value=q.enabled, key=f"q_{q.id}")

    with st.expander("Custom query"):
        custom_text = st.text_input("Search terms")
        custom_cat = st.selectbox("Category", [c for c in LeadCategory], format_func=lambda c: c.label)
        if st.button("Add query"):
            q = make_custom_query(custom_text, custom_cat)
            if q:
                st.session_state["queries"].append(q)
                st.rerun()

    if st.button("Scrape leads", type="primary"):
        selected = enabled_queries(st.session_state["queries"])
        if not api_key.strip():
            st.error("Please enter your SerpAPI key")
        elif not selected:
            st.error("Please enable at least one query")
        else:
            with st.spinner(f"Running {len(selected)} queries…"):
                result = batch_scrape_leads(api_key, selected, num_results_per_query=per_query, cache_dir=config.CACHE_DIR)
            _add_leads(result.leads)
            st.success(f"Found {len(result.leads)} unique leads from {result.total_results} results.")
            for err in result.errors:
                st.warning(err)

    uploaded = st.file_uploader("Merge a previous export", type=["csv"])
    if uploaded is not None and st.button("Merge file"):
        _add_leads(load_leads_csv(uploaded))
        st.rerun()

    if st.button("Clear leads"):
        st.session_state["leads"] = []
        st.rerun()


# ----------------------------
# Main: leads table
# ----------------------------
leads = st.session_state["leads"]
st.title("LaChow Lead Scraper")

if not leads:
    st.info("No leads yet. Pick queries in the sidebar and hit **Scrape leads**.")
    st.stop()

breakdown = category_breakdown(leads)
cols = st.columns(max(1, len(breakdown)))
for col, (_, row) in zip(cols, breakdown.iterrows()):
    col.metric(row["category"], int(row["count"]), f"{row['percentage']}%")

c1, c2, c3, c4 = st.columns([1, 1, 2, 1])
category = c1.selectbox("Category", ["all"] + [c.label for c in LeadCategory])
confidence = c2.selectbox("Confidence", ["all"] + [c.label for c in sorted(Confidence, reverse=True)])
term = c3.text_input("Search")
sort_by = c4.selectbox("Sort by", ["confidence", "name", "category", "scraped_at"])

visible = filter_leads(leads, category=category, confidence=confidence, search_term=term, sort_by=sort_by)
st.caption(f"Leads ({len(visible)})" + (f", filtered from {len(leads)} total" if len(visible) != len(leads) else ""))

df = leads_to_dataframe(visible)
if not df.empty:
    df = df.drop(columns=["id", "confidence_rank"])
st.dataframe(df, use_container_width=True, hide_index=True)

d1, d2 = st.columns(2)
d1.download_button(
    "Export CSV",
    data=(UTF8_BOM + leads_to_csv(visible)).encode("utf-8"),
    file_name=generate_csv_filename(),
    mime="text/csv",
    disabled=not visible,
)
if d2.button("Export to Google Sheets", disabled=not visible):
    res = export_to_google_sheets(visible)
    (st.success if res.success else st.error)(res.message)
