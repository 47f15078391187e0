# pulse/models/review.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP, func, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship
from pulse.database import Base

RATING_FIELDS = ("teaching", "difficulty", "organization", "helpfulness", "overall")


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    professor_name = Column(String(200), nullable=False, index=True)
    course_name = Column(String(200), nullable=False, index=True)
    department = Column(String(200), index=True)
    semester = Column(String(50), nullable=False)
    review_text = Column(Text, nullable=False)
    teaching_rating = Column(Integer, nullable=False, default=0)
    difficulty_rating = Column(Integer, nullable=False, default=0)
    organization_rating = Column(Integer, nullable=False, default=0)
    helpfulness_rating = Column(Integer, nullable=False, default=0)
    overall_rating = Column(Integer, nullable=False)
    student_name = Column(String(100))
    student_email = Column(String(255), index=True)
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False, index=True)

    # Constraints
    __table_args__ = (
        CheckConstraint('teaching_rating >= 0 AND teaching_rating <= 5', name='check_teaching_rating_range'),
        CheckConstraint('difficulty_rating >= 0 AND difficulty_rating <= 5', name='check_difficulty_rating_range'),
        CheckConstraint('organization_rating >= 0 AND organization_rating <= 5', name='check_organization_rating_range'),
        CheckConstraint('helpfulness_rating >= 0 AND helpfulness_rating <= 5', name='check_helpfulness_rating_range'),
        CheckConstraint('overall_rating >= 1 AND overall_rating <= 5', name='check_overall_rating_range'),
    )

    # Relationships
    likes = relationship("ReviewLike", back_populates="review", cascade="all, delete-orphan")


class ReviewLike(Base):
    __tablename__ = "review_likes"

    id = Column(Integer, primary_key=True, index=True)
    review_id = Column(Integer, ForeignKey("reviews.id", ondelete="CASCADE"), nullable=False, index=True)
    user_email = Column(String(255), nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())

    # One like per user per review, enforced by the store
    __table_args__ = (
        UniqueConstraint('review_id', 'user_email', name='uq_review_likes_review_user'),
    )

    review = relationship("Review", back_populates="likes")
