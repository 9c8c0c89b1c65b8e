"""
故事与章节表 ORM 模型
"""

from sqlalchemy import Column, String, Text, Integer, Float, Boolean, TIMESTAMP, ForeignKey, Index

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class Story(Base):
    """故事表"""
    __tablename__ = "stories"

    # 主键
    id = Column(String(64), primary_key=True, comment="故事ID")

    # 外键
    author_id = Column(String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, comment="作者ID")

    # 内容
    title = Column(String(255), nullable=False, comment="标题")
    description = Column(Text, nullable=True, comment="简介")
    content = Column(Text, nullable=True, comment="正文（可包含 [PDF_CHAPTER:url] 标记）")
    cover_url = Column(Text, nullable=True, comment="封面URL")
    pdf_url = Column(Text, nullable=True, comment="PDF 文件URL")
    author_name = Column(String(128), nullable=True, comment="作者署名")
    genre = Column(String(64), nullable=True, comment="类型")
    placement = Column(String(64), nullable=True, comment="首页展示位置")

    # 状态
    is_premium = Column(Boolean, nullable=False, default=False, comment="是否会员专享")
    is_published = Column(Boolean, nullable=False, default=False, comment="是否已发布")
    is_short_story = Column(Boolean, nullable=False, default=False, comment="是否短篇")
    is_featured = Column(Boolean, nullable=False, default=False, comment="是否精选")
    publish_at = Column(TIMESTAMP, nullable=True, comment="发布时间")

    # 评分（每次评分后重新计算）
    average_rating = Column(Float, nullable=False, default=0.0, comment="平均评分")
    rating_count = Column(Integer, nullable=False, default=0, comment="评分人数")

    # 时间戳
    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow, comment="更新时间")

    __table_args__ = (
        Index('idx_stories_author', 'author_id', 'created_at'),
        Index('idx_stories_published', 'is_published', 'created_at'),
    )


class StoryChapter(Base):
    """故事章节表"""
    __tablename__ = "story_chapters"

    # 主键
    id = Column(String(64), primary_key=True, comment="章节ID")

    # 外键
    story_id = Column(String(64), ForeignKey("stories.id", ondelete="CASCADE"), nullable=False, comment="故事ID")

    # 内容
    title = Column(String(255), nullable=False, comment="章节标题")
    chapter_order = Column(Integer, nullable=False, default=1, comment="章节顺序")
    content = Column(Text, nullable=True, comment="章节正文")
    file_url = Column(Text, nullable=True, comment="章节文件URL")
    file_type = Column(String(64), nullable=True, comment="文件类型")
    is_published = Column(Boolean, nullable=False, default=True, comment="是否发布")

    # 时间戳
    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow, comment="更新时间")

    __table_args__ = (
        Index('idx_chapters_story', 'story_id', 'chapter_order'),
    )
