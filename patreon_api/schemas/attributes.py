"""
Attribute schemas for every Patreon API v2 resource type.

Every field is optional because the API only returns the attributes named
in the request's sparse fieldset. Unknown attributes are kept so newer API
fields survive decoding.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class Attributes(BaseModel):
    """Common configuration for resource attributes."""

    model_config = ConfigDict(extra="allow")


class UserAttributes(Attributes):
    about: Optional[str] = None
    can_see_nsfw: Optional[bool] = None
    created: Optional[datetime] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    full_name: Optional[str] = None
    hide_pledges: Optional[bool] = None
    image_url: Optional[str] = None
    is_email_verified: Optional[bool] = None
    last_name: Optional[str] = None
    like_count: Optional[int] = None
    social_connections: Optional[Dict[str, Any]] = None
    thumb_url: Optional[str] = None
    url: Optional[str] = None
    vanity: Optional[str] = None


class CampaignAttributes(Attributes):
    created_at: Optional[datetime] = None
    creation_name: Optional[str] = None
    discord_server_id: Optional[str] = None
    google_analytics_id: Optional[str] = None
    has_rss: Optional[bool] = None
    has_sent_rss_notify: Optional[bool] = None
    image_small_url: Optional[str] = None
    image_url: Optional[str] = None
    is_charged_immediately: Optional[bool] = None
    is_monthly: Optional[bool] = None
    is_nsfw: Optional[bool] = None
    main_video_embed: Optional[str] = None
    main_video_url: Optional[str] = None
    one_liner: Optional[str] = None
    patron_count: Optional[int] = None
    pay_per_name: Optional[str] = None
    pledge_url: Optional[str] = None
    published_at: Optional[datetime] = None
    rss_artwork_url: Optional[str] = None
    rss_feed_title: Optional[str] = None
    show_earnings: Optional[bool] = None
    summary: Optional[str] = None
    thanks_embed: Optional[str] = None
    thanks_msg: Optional[str] = None
    thanks_video_url: Optional[str] = None
    url: Optional[str] = None
    vanity: Optional[str] = None


class MemberAttributes(Attributes):
    campaign_lifetime_support_cents: Optional[int] = None
    currently_entitled_amount_cents: Optional[int] = None
    email: Optional[str] = None
    full_name: Optional[str] = None
    is_follower: Optional[bool] = None
    last_charge_date: Optional[datetime] = None
    last_charge_status: Optional[str] = None
    lifetime_support_cents: Optional[int] = None
    next_charge_date: Optional[str] = None
    note: Optional[str] = None
    patron_status: Optional[str] = None
    pledge_cadence: Optional[int] = None
    pledge_relationship_start: Optional[datetime] = None
    will_pay_amount_cents: Optional[int] = None


class TierAttributes(Attributes):
    amount_cents: Optional[int] = None
    created_at: Optional[datetime] = None
    description: Optional[str] = None
    discord_role_ids: Optional[List[str]] = None
    edited_at: Optional[datetime] = None
    image_url: Optional[str] = None
    patron_count: Optional[int] = None
    post_count: Optional[int] = None
    published: Optional[bool] = None
    published_at: Optional[datetime] = None
    remaining: Optional[int] = None
    requires_shipping: Optional[bool] = None
    title: Optional[str] = None
    unpublished_at: Optional[datetime] = None
    url: Optional[str] = None
    user_limit: Optional[int] = None


class BenefitAttributes(Attributes):
    app_external_id: Optional[str] = None
    app_meta: Optional[Dict[str, Any]] = None
    benefit_type: Optional[str] = None
    created_at: Optional[datetime] = None
    deliverables_due_today_count: Optional[int] = None
    delivered_deliverables_count: Optional[int] = None
    description: Optional[str] = None
    is_deleted: Optional[bool] = None
    is_ended: Optional[bool] = None
    is_published: Optional[bool] = None
    next_deliverable_due_date: Optional[str] = None
    not_delivered_deliverables_count: Optional[int] = None
    rule_type: Optional[str] = None
    tiers_count: Optional[int] = None
    title: Optional[str] = None


class GoalAttributes(Attributes):
    amount_cents: Optional[int] = None
    completed_percentage: Optional[int] = None
    created_at: Optional[datetime] = None
    description: Optional[str] = None
    reached_at: Optional[datetime] = None
    title: Optional[str] = None


class AddressAttributes(Attributes):
    addressee: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    created_at: Optional[datetime] = None
    line_1: Optional[str] = None
    line_2: Optional[str] = None
    phone_number: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


class DeliverableAttributes(Attributes):
    completed_at: Optional[datetime] = None
    delivery_status: Optional[str] = None
    due_at: Optional[datetime] = None


class MediaAttributes(Attributes):
    created_at: Optional[datetime] = None
    download_url: Optional[str] = None
    file_name: Optional[str] = None
    image_urls: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    mimetype: Optional[str] = None
    owner_id: Optional[str] = None
    owner_relationship: Optional[str] = None
    owner_type: Optional[str] = None
    size_bytes: Optional[int] = None
    state: Optional[str] = None
    upload_expires_at: Optional[datetime] = None
    upload_parameters: Optional[Dict[str, Any]] = None
    upload_url: Optional[str] = None


class OAuthClientAttributes(Attributes):
    author_name: Optional[str] = None
    client_secret: Optional[str] = None
    default_scopes: Optional[str] = None
    description: Optional[str] = None
    domain: Optional[str] = None
    icon_url: Optional[str] = None
    name: Optional[str] = None
    privacy_policy_url: Optional[str] = None
    redirect_uris: Optional[str] = None
    tos_url: Optional[str] = None
    version: Optional[int] = None


class WebhookAttributes(Attributes):
    last_attempted_at: Optional[datetime] = None
    num_consecutive_times_failed: Optional[int] = None
    paused: Optional[bool] = None
    secret: Optional[str] = None
    triggers: Optional[List[str]] = None
    uri: Optional[str] = None
