#!/usr/bin/env python3
"""Streamlit UI for the AI Cluster Wizard.

This application walks the user through prerequisite checks and a five-step
workload questionnaire, then shows the recommended cluster config, its cost
breakdown and validation results.
"""

import json
from typing import Dict, Tuple

import streamlit as st

from cluster_wizard import ClusterRecommender, PrerequisitesManager, WorkloadProfile
from cluster_wizard.catalog import (
    GPU_TYPE_OPTIONS,
    MAX_NODE_COUNT,
    MIN_NODE_COUNT,
    MODEL_SIZE_OPTIONS,
    PRIORITY_OPTIONS,
    WIZARD_STEPS,
    WORKLOAD_TYPE_OPTIONS,
    WizardOption,
)
from cluster_wizard.report import config_summary_frame, cost_breakdown_frame, validation_frame

# Page configuration
st.set_page_config(
    page_title="AI Cluster Wizard",
    page_icon="🧙",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(
    """
    <style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1f77b4;
    }
    .section-header {
        font-size: 1.5rem;
        font-weight: bold;
        margin-top: 1rem;
        margin-bottom: 0.5rem;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

PHASES = [
    ("prerequisites", "Prerequisites", "Check environment setup"),
    ("wizard", "Configure", "Describe your workload"),
    ("provisioning", "Provision", "Create the cluster"),
]


def main():
    """Main Streamlit application."""
    st.markdown('<h1 class="main-header">🧙 AI-Optimized Cluster Wizard</h1>', unsafe_allow_html=True)
    st.markdown("**Reduce cluster setup time from hours to minutes**")

    # Initialize session state
    if "phase" not in st.session_state:
        st.session_state.phase = "prerequisites"
    if "wizard_step" not in st.session_state:
        st.session_state.wizard_step = 0
    if "profile_fields" not in st.session_state:
        st.session_state.profile_fields = {}
    if "result" not in st.session_state:
        st.session_state.result = None

    render_progress_tracker(st.session_state.phase)

    with st.sidebar:
        st.header("⚙️ Current Profile")
        if st.session_state.profile_fields:
            for name, value in st.session_state.profile_fields.items():
                st.text(f"{name}: {value}")
        else:
            st.info("No selections yet")

        if st.button("Start Over", key="start_over"):
            reset_wizard()
            st.session_state.phase = "prerequisites"
            st.rerun()

    if st.session_state.phase == "prerequisites":
        render_prerequisites()
    elif st.session_state.phase == "wizard":
        render_wizard()
    else:
        render_provisioning()


def render_progress_tracker(current_phase: str):
    """Render the three-phase progress indicator."""
    current_index = [phase_id for phase_id, _, _ in PHASES].index(current_phase)
    cols = st.columns(len(PHASES))
    for index, (col, (_, label, description)) in enumerate(zip(cols, PHASES)):
        with col:
            if index < current_index:
                st.markdown(f"✅ **{label}**")
            elif index == current_index:
                st.markdown(f"🔵 **{label}**")
            else:
                st.markdown(f"⚪ {label}")
            st.caption(description)
    st.divider()


def render_prerequisites():
    """Render the prerequisites check step."""
    st.markdown('<h2 class="section-header">Prerequisites</h2>', unsafe_allow_html=True)

    manager = PrerequisitesManager()
    check = manager.check_prerequisites()

    items = [
        ("Project ID", bool(check.project_id), check.project_id),
        ("Required APIs enabled", check.api_enabled, ""),
        (
            "IAM roles",
            not check.iam_roles,
            f"Missing: {', '.join(check.iam_roles)}" if check.iam_roles else "",
        ),
        ("gcloud CLI installed", check.gcloud_installed, ""),
        ("Default region set", check.region_set, manager.region),
        ("Billing enabled", check.billing_enabled, ""),
    ]
    for label, passed, detail in items:
        icon = "✅" if passed else "❌"
        st.markdown(f"{icon} **{label}** {detail}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("🔧 Auto-fix Issues", disabled=check.is_ready):
            for action in manager.auto_fix_prerequisites():
                st.info(action)
    with col2:
        if st.button("Continue ➡️", type="primary"):
            st.session_state.phase = "wizard"
            st.rerun()


def render_wizard():
    """Render the current step of the workload questionnaire."""
    step = st.session_state.wizard_step
    title, question = WIZARD_STEPS[step]

    st.progress((step + 1) / len(WIZARD_STEPS), text=f"Step {step + 1} of {len(WIZARD_STEPS)}")
    st.markdown(f'<h2 class="section-header">{title}</h2>', unsafe_allow_html=True)
    st.markdown(question)

    if step == 0:
        render_option_step("type", WORKLOAD_TYPE_OPTIONS)
    elif step == 1:
        render_option_step("model_size", MODEL_SIZE_OPTIONS)
    elif step == 2:
        render_option_step("gpu_type", GPU_TYPE_OPTIONS)
    elif step == 3:
        render_scale_step()
    else:
        render_review_step()

    if step > 0 and st.button("⬅️ Back", key="wizard_back"):
        st.session_state.wizard_step = step - 1
        st.rerun()


def render_option_step(field_name: str, options: Tuple[WizardOption, ...]):
    """Render one button per option; picking one advances the wizard."""
    for option in options:
        selected = st.session_state.profile_fields.get(field_name) == option.value
        label = f"{'✔️ ' if selected else ''}{option.label}"
        if st.button(label, key=f"{field_name}_{option.value}", use_container_width=True):
            complete_step({field_name: option.value})
        st.caption(option.description)


def render_scale_step():
    """Render the node count input and the priority choice."""
    node_count = st.number_input(
        "Number of Nodes",
        min_value=MIN_NODE_COUNT,
        max_value=MAX_NODE_COUNT,
        value=int(st.session_state.profile_fields.get("node_count", 1)),
        help=f"Between {MIN_NODE_COUNT} and {MAX_NODE_COUNT} nodes",
    )
    st.markdown("**Optimization Priority**")
    for option in PRIORITY_OPTIONS:
        if st.button(option.label, key=f"priority_{option.value}", use_container_width=True):
            complete_step({"node_count": int(node_count), "priority": option.value})
        st.caption(option.description)


def complete_step(step_data: Dict):
    """Merge a step's answers into the profile and move to the next step."""
    st.session_state.profile_fields = {**st.session_state.profile_fields, **step_data}
    st.session_state.result = None
    st.session_state.wizard_step = min(st.session_state.wizard_step + 1, len(WIZARD_STEPS) - 1)
    st.rerun()


def render_review_step():
    """Render the generated config, cost and validation for the profile."""
    try:
        profile = WorkloadProfile.from_dict(st.session_state.profile_fields)
    except ValueError as e:
        st.warning(f"⚠️ {e}")
        return

    if st.session_state.result is None:
        st.session_state.result = ClusterRecommender().recommend(profile)
    result = st.session_state.result
    config = result.config
    validation = result.validation

    if result.preset:
        st.success("Using a pre-configured profile for this workload")

    col1, col2, col3 = st.columns(3)
    col1.metric("Machine Type", config.machine_type)
    col2.metric("GPUs per Node", config.gpu_count)
    col3.metric("Monthly Cost", f"${config.cost_estimate.monthly_cost:,.2f}")

    st.subheader("Cluster Configuration")
    st.dataframe(config_summary_frame(config), hide_index=True, use_container_width=True)

    st.subheader("Cost Breakdown")
    st.dataframe(cost_breakdown_frame(config), hide_index=True, use_container_width=True)

    st.subheader("Validation")
    if validation.is_valid:
        st.success("✅ Configuration is valid")
    for message in validation.errors:
        st.error(f"❌ {message}")
    for message in validation.warnings:
        st.warning(f"⚠️ {message}")
    for message in validation.recommendations:
        st.info(f"💡 {message}")

    findings = validation_frame(validation)
    st.download_button(
        "📥 Download Findings (CSV)",
        data=findings.to_csv(index=False),
        file_name="validation.csv",
        mime="text/csv",
    )
    st.download_button(
        "📥 Download Config (JSON)",
        data=json.dumps(result.to_dict(), indent=2),
        file_name="cluster_config.json",
        mime="application/json",
    )

    if st.button("🚀 Deploy Cluster", type="primary", disabled=not validation.is_valid):
        st.session_state.phase = "provisioning"
        st.rerun()


def render_provisioning():
    """Render the provisioning placeholder page."""
    st.markdown('<h2 class="section-header">Cluster Provisioning</h2>', unsafe_allow_html=True)
    st.write("Your AI-optimized cluster is being provisioned...")

    result = st.session_state.result
    if result is not None:
        st.json(result.config.to_dict())

    if st.button("⬅️ Back to Configuration"):
        st.session_state.phase = "wizard"
        st.rerun()


def reset_wizard():
    st.session_state.wizard_step = 0
    st.session_state.profile_fields = {}
    st.session_state.result = None


if __name__ == "__main__":
    main()
