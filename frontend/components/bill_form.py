import streamlit as st
import pandas as pd
from typing import Any, Dict, List, Tuple

from services.payload import clean_rows


def render_bill_setup() -> Tuple[float, List[Dict[str, Any]], List[Dict[str, Any]]]:
    """
    Render the service charge, menu item and diner inputs

    Returns:
        Tuple of (service_charge_percentage, items, diners) with blank rows dropped
    """
    st.subheader("🍽️ Step 1: Items & Diners")

    with st.expander("💡 How to use this app"):
        st.markdown("""
        1. **Enter the service charge** printed on the bill
        2. **List every item** and tick *Shared* for dishes the whole table split
        3. **Add each diner** with the tip percentage they want to leave
        4. **Assign personal items** to the diner who ordered them

        Shared items are split equally between everyone. Service charge and tip are
        added on top of each diner's own subtotal.
        """)

    service_charge = st.number_input(
        "Service charge (%)",
        min_value=0.0,
        value=float(st.session_state.get("service_charge") or 0.0),
        step=0.5,
        help="Applied to every diner's subtotal"
    )

    st.markdown("### 🧾 Menu Items")
    items_df = st.data_editor(
        pd.DataFrame(st.session_state.get("items") or [], columns=["name", "price", "is_shared"]),
        num_rows="dynamic",
        column_config={
            "name": st.column_config.TextColumn("Item", required=True),
            "price": st.column_config.NumberColumn("Price", min_value=0.0, format="$%.2f"),
            "is_shared": st.column_config.CheckboxColumn("Shared", default=False),
        },
        key="items_editor",
        use_container_width=True,
    )

    st.markdown("### 👥 Diners")
    diners_df = st.data_editor(
        pd.DataFrame(st.session_state.get("diners") or [], columns=["name", "tip_percentage"]),
        num_rows="dynamic",
        column_config={
            "name": st.column_config.TextColumn("Name", required=True),
            "tip_percentage": st.column_config.NumberColumn("Tip (%)", min_value=0.0, format="%.1f"),
        },
        key="diners_editor",
        use_container_width=True,
    )

    items = clean_rows(items_df.to_dict("records"), "price")
    diners = clean_rows(diners_df.to_dict("records"), "tip_percentage")
    return service_charge, items, diners


def render_assignment_section(items: List[Dict[str, Any]], diner_names: List[str]) -> Dict[int, str]:
    """
    Render one diner picker per personal item

    Returns:
        Dictionary mapping item index to the chosen diner name
    """
    st.subheader("🙋 Step 2: Who Had What?")

    assignments = {}
    personal = [(index, item) for index, item in enumerate(items) if not item.get("is_shared")]
    if not personal:
        st.info("ℹ️ Every item is shared, nothing to assign.")
        return assignments

    saved = st.session_state.get("assignments") or {}
    for index, item in personal:
        default = saved.get(index)
        assignments[index] = st.selectbox(
            f"{item['name']} (${item['price']:.2f})",
            options=diner_names,
            index=diner_names.index(default) if default in diner_names else 0,
            key=f"assign_{index}",
        )
    return assignments
