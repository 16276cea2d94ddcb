"""initial schema"""

from alembic import op
import sqlalchemy as sa


revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=50), nullable=False),
        sa.Column("department", sa.String(length=255), nullable=True),
        sa.Column("roll_number", sa.String(length=50), nullable=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"])
    op.create_index("ix_users_department", "users", ["department"])

    op.create_table(
        "tickets",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("ticket_number", sa.String(length=20), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("issue_type", sa.String(length=255), nullable=True),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="pending"),
        sa.Column("priority", sa.String(length=50), nullable=False, server_default="medium"),
        sa.Column("department", sa.String(length=255), nullable=False),
        sa.Column("routing_department", sa.String(length=50), nullable=False),
        sa.Column("submitted_by", sa.String(length=36), nullable=False),
        sa.Column("submitter_name", sa.String(length=255), nullable=False),
        sa.Column("submitter_email", sa.String(length=255), nullable=False),
        sa.Column("submitter_roll_number", sa.String(length=50), nullable=True),
        sa.Column("assigned_to", sa.String(length=36), nullable=True),
        sa.Column("assigned_role", sa.String(length=50), nullable=True),
        sa.Column("location", sa.JSON(), nullable=True),
        sa.Column("attachments", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("resolved_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_tickets_ticket_number", "tickets", ["ticket_number"], unique=True)
    op.create_index("ix_tickets_category", "tickets", ["category"])
    op.create_index("ix_tickets_status", "tickets", ["status"])
    op.create_index("ix_tickets_department", "tickets", ["department"])
    op.create_index("ix_tickets_submitted_by", "tickets", ["submitted_by"])

    op.create_table(
        "ticket_activity",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "ticket_id",
            sa.String(length=36),
            sa.ForeignKey("tickets.id"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("action", sa.Text(), nullable=False),
        sa.Column("performed_by", sa.String(length=36), nullable=False),
        sa.Column("performed_by_role", sa.String(length=50), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_ticket_activity_ticket_id", "ticket_activity", ["ticket_id"])

    op.create_table(
        "notices",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("department", sa.String(length=255), nullable=True),
        sa.Column("target_roles", sa.JSON(), nullable=False),
        sa.Column("priority", sa.String(length=50), nullable=False, server_default="normal"),
        sa.Column("published_by", sa.String(length=36), nullable=False),
        sa.Column("published_at", sa.DateTime(), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_notices_published_at", "notices", ["published_at"])
    op.create_index("ix_notices_is_active", "notices", ["is_active"])

    op.create_table(
        "lectures",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("department", sa.String(length=255), nullable=False),
        sa.Column("course", sa.String(length=255), nullable=False),
        sa.Column("semester", sa.String(length=50), nullable=False),
        sa.Column("subject", sa.String(length=255), nullable=False),
        sa.Column("topic", sa.String(length=255), nullable=True),
        sa.Column("video_url", sa.String(length=1024), nullable=False),
        sa.Column("thumbnail_url", sa.String(length=1024), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("uploaded_by", sa.String(length=36), nullable=False),
        sa.Column("uploaded_at", sa.DateTime(), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_lectures_department", "lectures", ["department"])

    op.create_table(
        "syllabus",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("department", sa.String(length=255), nullable=False),
        sa.Column("course", sa.String(length=255), nullable=False),
        sa.Column("semester", sa.String(length=50), nullable=False),
        sa.Column("subject", sa.String(length=255), nullable=False),
        sa.Column("file_url", sa.String(length=1024), nullable=False),
        sa.Column("extracted_content", sa.Text(), nullable=True),
        sa.Column("uploaded_by", sa.String(length=36), nullable=False),
        sa.Column("uploaded_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_syllabus_department", "syllabus", ["department"])
    op.create_index("ix_syllabus_subject", "syllabus", ["subject"])

    op.create_table(
        "locations",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("qr_code", sa.String(length=100), nullable=True),
        sa.Column("building", sa.String(length=255), nullable=True),
        sa.Column("floor", sa.String(length=50), nullable=True),
    )
    op.create_index("ix_locations_type", "locations", ["type"])
    op.create_index("ix_locations_building", "locations", ["building"])

    op.create_table(
        "qr_codes",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "location_id",
            sa.String(length=36),
            sa.ForeignKey("locations.id"),
            nullable=False,
        ),
        sa.Column("qr_code", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_qr_codes_qr_code", "qr_codes", ["qr_code"], unique=True)

    op.create_table(
        "ai_chats",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("assistant", sa.String(length=20), nullable=False),
        sa.Column("query", sa.Text(), nullable=False),
        sa.Column("response", sa.Text(), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_ai_chats_user_id", "ai_chats", ["user_id"])


def downgrade():
    op.drop_table("ai_chats")
    op.drop_table("qr_codes")
    op.drop_table("locations")
    op.drop_table("syllabus")
    op.drop_table("lectures")
    op.drop_table("notices")
    op.drop_table("ticket_activity")
    op.drop_table("tickets")
    op.drop_table("users")
