import streamlit as st

from core.client import DashboardAPIClient
from core.config import configure_logging, get_settings
from core.dashboard import CHART_TITLES, build_dashboard
from core.filters import FilterSet, clear_all, filter_options, set_filter

FILTER_LABELS = {
    "end_year": "End Year",
    "topic": "Topics",
    "sector": "Sector",
    "region": "Region",
    "pestle": "PEST",
    "source": "Source",
    "country": "Country",
    "swot": "SWOT",
    "city": "City",
}
ANY = "All"


@st.cache_data(show_spinner="Loading records…")
def load_records(api_url: str):
    return DashboardAPIClient(api_url).fetch_records()


# ---------- UI setup ----------
settings = get_settings()
configure_logging(settings.log_level)
st.set_page_config(page_title="Data Visualization Dashboard", layout="wide")
st.title("Data Visualization Dashboard")

records = load_records(settings.api_url)
if not records:
    # Refetch on the next run instead of serving a cached failure.
    load_records.clear()
    st.warning(f"No records loaded from {settings.api_url}/api/data.")

if "filters" not in st.session_state:
    st.session_state["filters"] = clear_all()
state: FilterSet = st.session_state["filters"]

# ----- Sidebar: filters -----
options = filter_options(records)
with st.sidebar:
    st.markdown("### Filters")
    for name, label in FILTER_LABELS.items():
        choices = [ANY] + options.get(name, [])
        current = getattr(state, name)
        index = choices.index(current) if current in choices else 0
        picked = st.selectbox(label, choices, index=index, key=f"filter_{name}")
        state = set_filter(state, name, "" if picked == ANY else picked)
    if st.button("Clear filters"):
        for name in FILTER_LABELS:
            st.session_state.pop(f"filter_{name}", None)
        state = clear_all()
        st.session_state["filters"] = state
        st.rerun()
st.session_state["filters"] = state

payload = build_dashboard(records, state)
st.caption(f"{payload['count']} of {payload['total']} records match the current filters.")

for name, title in CHART_TITLES.items():
    st.subheader(title)
    spec = payload["vega"].get(name)
    if spec is None:
        st.info("No records to chart.")
        continue
    st.vega_lite_chart(spec, use_container_width=True)
