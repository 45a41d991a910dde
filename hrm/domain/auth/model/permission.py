"""Permission and feature vocabularies.

Permissions gate backend actions; features gate UI surfaces. Both are
string enums, so members compare and hash equal to their plain tag strings.
"""

from enum import StrEnum


class Permission(StrEnum):
    """Capability tags granted to roles."""

    # Intern
    VIEW_ASSIGNED_TASKS = "view_assigned_tasks"
    SUBMIT_TIMESHEETS = "submit_timesheets"
    SUBMIT_REPORTS = "submit_reports"
    REQUEST_PROMOTION = "request_promotion"
    VIEW_TRAINING_RESOURCES = "view_training_resources"
    RECEIVE_NOTIFICATIONS = "receive_notifications"

    # Employee
    MANAGE_PERSONAL_TASKS = "manage_personal_tasks"
    VIEW_TEAM_CALENDAR = "view_team_calendar"
    PARTICIPATE_PROJECTS = "participate_projects"
    JOIN_VIDEO_CONFERENCES = "join_video_conferences"
    ACCESS_PAYROLL_VIEW = "access_payroll_view"
    TEAM_COLLABORATION = "team_collaboration"
    EMAIL_NOTIFICATIONS = "email_notifications"
    SPRINT_PARTICIPATION = "sprint_participation"

    # Manager
    CREATE_TEAMS = "create_teams"
    ASSIGN_TASKS = "assign_tasks"
    MANAGE_PROJECTS = "manage_projects"
    MANAGE_SPRINTS = "manage_sprints"
    APPROVE_LEAVE_REQUESTS = "approve_leave_requests"
    VIEW_TEAM_PERFORMANCE = "view_team_performance"
    MODERATE_TEAM_COMMUNICATION = "moderate_team_communication"
    SCHEDULE_TEAM_MEETINGS = "schedule_team_meetings"
    TRIGGER_NOTIFICATIONS = "trigger_notifications"

    # Admin
    CONFIGURE_POLICIES = "configure_policies"
    MANAGE_ALL_ROLES = "manage_all_roles"
    ACCESS_ALL_STATISTICS = "access_all_statistics"
    ADVANCED_REPORTING = "advanced_reporting"
    MANAGE_INTEGRATIONS = "manage_integrations"
    COMPANY_NOTIFICATIONS = "company_notifications"
    PAYROLL_MANAGEMENT = "payroll_management"
    SYSTEM_CONFIGURATION = "system_configuration"

    # Super admin
    ASSIGN_ADMIN_ROLES = "assign_admin_roles"
    PROMOTE_DEMOTE_ADMINS = "promote_demote_admins"
    TRANSFER_SUPER_ADMIN = "transfer_super_admin"
    GLOBAL_COMPANY_OVERSIGHT = "global_company_oversight"
    SECURITY_SETTINGS = "security_settings"
    FULL_ACCESS_ALL_FEATURES = "full_access_all_features"


class Feature(StrEnum):
    """UI-surface tags granted to roles."""

    # Intern
    INTERN_DASHBOARD = "intern_dashboard"
    TASK_VIEWER = "task_viewer"
    TIMESHEET_SUBMISSION = "timesheet_submission"
    TRAINING_PORTAL = "training_portal"
    PROMOTION_REQUESTS = "promotion_requests"

    # Employee
    EMPLOYEE_DASHBOARD = "employee_dashboard"
    FULL_TASK_MANAGEMENT = "full_task_management"
    PERSONAL_CALENDAR = "personal_calendar"
    TEAM_COLLABORATION = "team_collaboration"
    PAYROLL_VIEW = "payroll_view"
    PROJECT_PARTICIPATION = "project_participation"
    VIDEO_CONFERENCES = "video_conferences"

    # Manager
    MANAGER_DASHBOARD = "manager_dashboard"
    TEAM_MANAGEMENT = "team_management"
    PROJECT_CREATION = "project_creation"
    SPRINT_MANAGEMENT = "sprint_management"
    LEAVE_APPROVAL = "leave_approval"
    TEAM_STATISTICS = "team_statistics"
    TEAM_CALENDAR_INTEGRATION = "team_calendar_integration"

    # Admin
    ADMIN_DASHBOARD = "admin_dashboard"
    POLICY_CONFIGURATION = "policy_configuration"
    ROLE_MANAGEMENT = "role_management"
    COMPANY_STATISTICS = "company_statistics"
    ADVANCED_REPORTS = "advanced_reports"
    INTEGRATION_MANAGEMENT = "integration_management"
    PAYROLL_ADMINISTRATION = "payroll_administration"

    # Super admin
    SUPER_ADMIN_DASHBOARD = "super_admin_dashboard"
    GLOBAL_OVERSIGHT = "global_oversight"
    ADMIN_ROLE_MANAGEMENT = "admin_role_management"
    SECURITY_CONFIGURATION = "security_configuration"
    SUPER_ADMIN_TRANSFER = "super_admin_transfer"
    SYSTEM_MANAGEMENT = "system_management"
