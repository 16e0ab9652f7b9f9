"""
Streamlit operator UI for the Pricing Gateway.

Features:
- Editable parts grid (extra columns are passed through to the rules)
- Price via individual rules, per-part flow, or batch flow
- Results table with CSV export and the raw JSON response
"""
import streamlit as st
import pandas as pd
import httpx
import os
import sys
from pathlib import Path
from datetime import datetime

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pricing_gateway.config.settings import get_settings
from pricing_gateway.services.part_table import (
    flow_results_frame,
    parts_from_frame,
    pricing_results_frame,
)


st.set_page_config(
    page_title="Part Pricing Gateway",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


settings = get_settings_cached()

DEFAULT_PARTS = pd.DataFrame([
    {"basePrice": 100.0, "method": "CNC", "material": "Aluminum", "quantity": 50, "customerTier": "Gold"},
    {"basePrice": 42.5, "method": "3D Print", "material": "PLA", "quantity": 10, "customerTier": "Silver"},
])

MODES = {
    "Rules (markup / discount / manufacturability)": "/rules",
    "Flow (one call per part)": "/flow",
    "Flow (single batch call)": "/flow?batch=true",
}


# ============================================================================
# SIDEBAR: Gateway Connection
# ============================================================================
with st.sidebar:
    st.header("Gateway")

    with st.container(border=True):
        gateway_url = st.text_input(
            "Gateway URL",
            value=os.getenv("GATEWAY_URL", f"http://localhost:{settings.port}"),
        )
        mode_label = st.radio("Pricing Mode", options=list(MODES.keys()))

    st.divider()
    if settings.pricing_flow_id:
        st.caption(f"Flow: `{settings.pricing_flow_id}`")
    else:
        st.warning("PRICING_FLOW_ID is not set")


# ============================================================================
# MAIN CONTENT
# ============================================================================
st.title("Part Pricing")
st.caption(f"Pricing Gateway | {datetime.now().strftime('%Y-%m-%d')}")

if 'parts_df' not in st.session_state:
    st.session_state.parts_df = DEFAULT_PARTS.copy()

st.subheader("Parts")
edited_df = st.data_editor(
    st.session_state.parts_df,
    use_container_width=True,
    num_rows="dynamic",
    column_config={
        "basePrice": st.column_config.NumberColumn("Base Price", format="$%.2f", required=True),
        "quantity": st.column_config.NumberColumn("Quantity", min_value=0, step=1, required=True),
    },
    key="parts_editor",
)

if st.button("Calculate Prices", type="primary"):
    parts = parts_from_frame(edited_df)
    endpoint = MODES[mode_label]

    if not parts:
        st.warning("Add at least one part")
    else:
        try:
            with st.spinner("Calling pricing gateway..."):
                response = httpx.post(
                    f"{gateway_url.rstrip('/')}{endpoint}",
                    json=parts,
                    timeout=settings.request_timeout,
                )
        except httpx.HTTPError as e:
            st.error(f"Gateway unreachable: {e}")
        else:
            if response.status_code != 200:
                st.error(f"HTTP {response.status_code}: {response.text}")
            else:
                st.session_state.last_results = (endpoint, response.json())

if 'last_results' in st.session_state:
    endpoint, results = st.session_state.last_results

    st.subheader("Results")
    if endpoint == "/rules":
        results_df = pricing_results_frame(results)

        m1, m2, m3 = st.columns(3)
        m1.metric("Parts", len(results_df))
        m2.metric("Total Final Price", f"${results_df['finalPrice'].sum():,.2f}" if not results_df.empty else "$0.00")
        m3.metric("Manufacturable", int(results_df['manufacturable'].sum()) if not results_df.empty else 0)
    else:
        results_df = flow_results_frame(results)

    st.dataframe(results_df, use_container_width=True)

    st.download_button(
        "📥 CSV",
        data=results_df.to_csv(index=False),
        file_name=f"pricing_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv",
        mime="text/csv",
    )

    with st.expander("Raw Response"):
        st.json(results)
