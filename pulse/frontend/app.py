# pulse/frontend/app.py
# Run with: streamlit run pulse/frontend/app.py
import streamlit as st

from pulse.config import settings
from pulse.frontend.client import PulseClient
from pulse.frontend.session import UserSession, display_author

st.set_page_config(page_title="PULSE", layout="wide")

client = PulseClient()
user = UserSession.load(st.session_state)

RATING_LABELS = [
    ("teaching", "Teaching Quality"),
    ("difficulty", "Course Difficulty"),
    ("organization", "Organization"),
    ("helpfulness", "Helpfulness"),
]


def stars(value) -> str:
    value = int(value or 0)
    return "★" * value + "☆" * (5 - value)


# ==========================================
# AUTH VIEW
# ==========================================

def render_auth():
    st.title("PULSE")
    st.caption("Professor Undergrad Learning & Student Evaluations")

    mode = st.radio("Account", ["Register", "Verify email", "Login"], horizontal=True)

    if mode == "Register":
        name = st.text_input("Name")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        if st.button("Register"):
            if not name or not email or not password:
                st.error("Fill all fields")
            else:
                result = client.register(name, email, password)
                if result.success:
                    st.session_state["pending_name"] = name
                    st.success(result.message or "Verification code sent to your email!")
                else:
                    st.error(result.message)

    elif mode == "Verify email":
        email = st.text_input("Email", key="verify_email")
        code = st.text_input("Verification code", key="verify_code")
        col_verify, col_resend = st.columns(2)
        if col_verify.button("Verify"):
            result = client.verify(email, code)
            if result.success:
                user.start(st.session_state.get("pending_name"), email)
                user.save(st.session_state)
                st.rerun()
            else:
                st.error(result.message)
        if col_resend.button("Resend code"):
            result = client.resend_verification(email)
            (st.success if result.success else st.error)(result.message)

    else:
        email = st.text_input("Email", key="login_email")
        password = st.text_input("Password", type="password", key="login_password")
        if st.button("Login"):
            result = client.login(email, password)
            if result.success:
                user.start(result.data.get("name"), email)
                user.save(st.session_state)
                st.rerun()
            else:
                st.error(result.message or "Login failed. Please check your credentials.")


# ==========================================
# REVIEW CARDS
# ==========================================

def render_review_card(review, key_prefix: str):
    with st.container(border=True):
        st.subheader(review["professorName"])
        course_line = f"{review['courseName']} • {review['semester']}"
        if review.get("department"):
            course_line += f" • {review['department']}"
        st.caption(course_line)
        st.markdown(stars(review["ratings"]["overall"]))
        st.write(review["reviewText"])

        cols = st.columns(len(RATING_LABELS))
        for col, (field, label) in zip(cols, RATING_LABELS):
            col.metric(label, review["ratings"].get(field, 0))

        meta, like = st.columns([4, 1])
        created = (review.get("createdAt") or "")[:10]
        meta.caption(f"- {display_author(review)}  {created}")
        label = f"👍 {review['likes']}"
        if user.can_like(review):
            if like.button(label, key=f"{key_prefix}-like-{review['id']}"):
                result = client.like(review["id"], user.email)
                if result.success:
                    review["likes"] = result.data.get("likes", review["likes"])
                    review["likedByCurrentUser"] = True
                    st.rerun()
                else:
                    st.error(result.message)
        else:
            like.button(label, key=f"{key_prefix}-like-{review['id']}", disabled=True)


# ==========================================
# TABS
# ==========================================

def render_browse_tab():
    st.header("Find Professor Reviews")
    kind = st.radio(
        "Search by",
        ["professor", "course", "department"],
        format_func=str.title,
        horizontal=True,
    )
    query = st.text_input("Search", placeholder="Professor's name, course code or department")

    if st.button("Search") and query.strip():
        result = client.search(kind, query, viewer=user.email)
        if result.success:
            st.session_state["search_results"] = result.data.get("results", [])
            st.session_state.pop("summary", None)
        else:
            st.error(result.message)

    results = st.session_state.get("search_results") or []
    if results:
        if st.button("Summarize these reviews"):
            summary = client.summarize([r["reviewText"] for r in results])
            st.session_state["summary"] = summary.data.get("summary") if summary.success else summary.message
        if st.session_state.get("summary"):
            st.info(st.session_state["summary"])
        for review in results:
            render_review_card(review, "search")
        return

    st.subheader("Recent Reviews")
    latest = client.latest_reviews(viewer=user.email)
    if not latest.success:
        st.error(latest.message)
    elif not latest.data.get("reviews"):
        st.write("No reviews available yet. Be the first to submit one!")
    for review in latest.data.get("reviews", []):
        render_review_card(review, "latest")


def render_submit_tab():
    st.header("Submit a Professor Review")
    st.info(
        "Please keep your review respectful and constructive. Focus on course content, "
        "teaching methods, and your learning experience."
    )
    with st.form("review-form", clear_on_submit=True):
        professor_name = st.text_input("Professor Name*")
        course_name = st.text_input("Course Name/Code*")
        department = st.text_input("Department")
        semester = st.selectbox("Semester*", [""] + settings.semesters)
        ratings = {
            field: st.slider(label, 0, 5, 0) for field, label in RATING_LABELS
        }
        ratings["overall"] = st.slider("Overall Rating*", 0, 5, 0)
        review_text = st.text_area("Your Review*", max_chars=settings.REVIEW_TEXT_MAX_LENGTH)
        submitted = st.form_submit_button("Submit Review")

    if submitted:
        if not professor_name or not course_name or not semester or not review_text or not ratings["overall"]:
            st.error("Please fill out all required fields and provide an overall rating.")
            return
        result = client.submit_review({
            "professorName": professor_name,
            "courseName": course_name,
            "department": department,
            "semester": semester,
            "reviewText": review_text,
            "ratings": ratings,
            "studentEmail": user.email,
            "studentName": user.name,
        })
        if result.success:
            st.success("Review submitted successfully!")
        else:
            st.error(result.message or "Error submitting review. Please try again.")


def render_my_reviews_tab():
    st.header("My Reviews")
    result = client.user_reviews(user.email)
    if not result.success:
        st.error(result.message)
        return
    reviews = result.data.get("reviews", [])
    if not reviews:
        st.write("You haven't submitted any reviews yet.")
    for review in reviews:
        render_review_card(review, "mine")


def render_dashboard():
    header, logout = st.columns([5, 1])
    header.title("PULSE")
    header.caption(f"Welcome, {user.name}")
    if logout.button("Log Out"):
        user.end()
        user.save(st.session_state)
        st.session_state.pop("search_results", None)
        st.session_state.pop("summary", None)
        st.rerun()

    browse, submit, mine = st.tabs(["Browse Reviews", "Submit Review", "My Reviews"])
    with browse:
        render_browse_tab()
    with submit:
        render_submit_tab()
    with mine:
        render_my_reviews_tab()


if user.is_active:
    render_dashboard()
else:
    render_auth()
