import streamlit as st
import pandas as pd
from loguru import logger

from services.api_client import get_api_client
from services.payload import build_split_payload
from components.bill_form import render_bill_setup, render_assignment_section
import dotenv

dotenv.load_dotenv()

# Configure logging
logger.add("frontend.log", rotation="1 MB", level="DEBUG")

# Page config
st.set_page_config(
    page_title="Bill Splitter",
    layout="centered",
    page_icon="🧾",
    initial_sidebar_state="collapsed"
)

# Custom CSS
st.markdown("""
<style>
    .stButton > button {
        width: 100%;
        border-radius: 10px;
        border: 2px solid #f0f2f6;
        background-color: white;
        color: #262730;
        font-weight: 500;
    }
    .stButton > button:hover {
        border-color: #ff6b6b;
        color: #ff6b6b;
    }
    .step-indicator {
        text-align: center;
        margin: 20px 0;
        padding: 10px;
        background-color: #f8f9fa;
        border-radius: 10px;
    }
</style>
""", unsafe_allow_html=True)

st.title("🧾 Restaurant Bill Splitter")

# Initialize API client
api_client = get_api_client()

# Check backend health
if not api_client.health_check():
    st.error("🚨 Backend API is not available. Please make sure the backend server is running.")
    st.stop()

# Session state initialization
if "step" not in st.session_state:
    st.session_state.step = 1
for key in ("service_charge", "items", "diners", "assignments", "report"):
    if key not in st.session_state:
        st.session_state[key] = None

# Step indicator
steps = ["🍽️ Items & Diners", "🙋 Assign Items", "💰 Split"]
current_step = st.session_state.step

st.markdown('<div class="step-indicator">', unsafe_allow_html=True)
progress_text = " → ".join([f"**{step}**" if i + 1 == current_step else step for i, step in enumerate(steps)])
st.markdown(progress_text, unsafe_allow_html=True)
st.markdown('</div>', unsafe_allow_html=True)
st.progress(current_step / len(steps))


def money(value) -> str:
    return f"${float(value):.2f}"


# Step 1: Items and diners
if st.session_state.step == 1:
    service_charge, items, diners = render_bill_setup()

    if not diners:
        st.warning("⚠️ Add at least one diner to split the bill.")

    if st.button("➡️ Next: Assign Items", disabled=not diners):
        st.session_state.service_charge = service_charge
        st.session_state.items = items
        st.session_state.diners = diners
        st.session_state.step = 2
        st.rerun()

# Step 2: Assign personal items
elif st.session_state.step == 2:
    items = st.session_state.items or []
    diners = st.session_state.diners or []
    assignments = render_assignment_section(items, [diner["name"] for diner in diners])

    col1, col2 = st.columns(2)
    with col1:
        if st.button("← Go Back"):
            st.session_state.assignments = assignments
            st.session_state.step = 1
            st.rerun()
    with col2:
        if st.button("💰 Calculate Split"):
            st.session_state.assignments = assignments
            payload = build_split_payload(st.session_state.service_charge, items, diners, assignments)

            with st.spinner("Calculating split..."):
                success, response = api_client.split_bill(payload)

            if success and response.get('success'):
                st.session_state.report = response.get('report')
                st.session_state.step = 3
                st.rerun()
            else:
                error_msg = response.get('error', 'Unknown error')
                logger.error(f"Split failed: {error_msg}")
                st.error(f"❌ Failed to calculate split: {error_msg}")

# Step 3: Results
elif st.session_state.step == 3:
    st.subheader("💰 Step 3: Your Bill Split")
    report = st.session_state.report

    if report:
        totals_df = pd.DataFrame(
            [{"Diner": t["name"], "Total": float(t["total"])} for t in report["totals"]]
        )
        st.markdown("### 💸 Who Pays What")
        st.dataframe(
            totals_df,
            column_config={"Total": st.column_config.NumberColumn(format="$%.2f")},
            hide_index=True,
            use_container_width=True,
        )

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Total Bill", money(report["grand_total"]))
        with col2:
            st.metric("Shared Items", money(report["shared_items_total"]))
        with col3:
            st.metric("Service Charge", f"{report['service_charge_percentage']}%")

        with st.expander("🔍 View Detailed Breakdown", expanded=False):
            st.markdown("#### 👥 Diners")
            for diner in report["diners"]:
                st.markdown(f"• **{diner['name']}** (Tip: {diner['tip_percentage']}%)")
                for item in diner["personal_items"]:
                    st.markdown(f"    - {item['name']}: {money(item['price'])}")

            if report["shared_items"]:
                st.markdown("#### 🍕 Shared Items (split equally)")
                for item in report["shared_items"]:
                    st.markdown(f"• {item['name']}: {money(item['price'])}")

        if report.get("unassigned_items"):
            st.warning(
                "⚠️ Not charged to anyone: "
                + ", ".join(item["name"] for item in report["unassigned_items"])
            )

        summary_text = "\n".join([f"{t['name']}: {money(t['total'])}" for t in report["totals"]])
        if st.button("📋 Copy Summary"):
            st.code(summary_text)
    else:
        st.error("❌ No split available. Please go back and enter the bill again.")

    st.markdown("---")
    if st.button("🔄 Split Another Bill"):
        for key in list(st.session_state.keys()):
            del st.session_state[key]
        st.rerun()
