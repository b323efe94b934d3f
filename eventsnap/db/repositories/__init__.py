"""
Repository layer for database operations.

Async functions taking an explicit AsyncSession, one module per entity.
Lookups return None for missing rows; writes against a missing row raise
HTTPException(404).
"""
from eventsnap.db.repositories.users import (
    create_user,
    get_user,
    get_user_by_email,
    list_users,
    update_user,
    deactivate_user,
    delete_user,
)
from eventsnap.db.repositories.themes import (
    create_theme,
    get_theme,
    list_themes,
    update_theme,
    count_events_using_theme,
    delete_theme,
)
from eventsnap.db.repositories.events import (
    generate_qr_code_token,
    create_event,
    get_event,
    get_event_by_token,
    list_events,
    update_event,
    delete_event,
    delete_event_children,
)
from eventsnap.db.repositories.programs import (
    create_program,
    get_program,
    list_programs_for_event,
    update_program,
    delete_program,
    reorder_programs,
)
from eventsnap.db.repositories.contacts import (
    create_contact,
    get_contact,
    list_contacts_for_event,
    update_contact,
    delete_contact,
)
from eventsnap.db.repositories.uploads import (
    create_upload,
    get_upload,
    list_uploads_for_event,
    list_uploads,
    update_upload,
    delete_upload,
    count_recent_uploads,
    check_upload_rate_limit,
)
