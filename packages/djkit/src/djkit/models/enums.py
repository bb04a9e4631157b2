"""Enumerations shared by the prompt builder, the proxy and the client.

Values are the strings exchanged on the wire, so they double as display labels.
"""

import enum


class EventType(str, enum.Enum):
    WEDDING = "Wedding"
    CORPORATE = "Corporate Event"
    PRIVATE_PARTY = "Private Party"


class TemplateType(str, enum.Enum):
    AGREEMENT = "Service Agreement"
    DEPOSIT_TERMS = "Deposit Terms"
    EMAIL_FOLLOW_UP = "Email Follow-up"
    CREATIVE_CONTENT = "Creative Content"
    MUSIC_PLAYLISTS = "Music Planning & Playlists"
    SALES_ASSISTANT = "Sales Assistant (Objection Handling)"
    EVENT_CHECKLIST = "Event Checklist"
    PRE_EVENT_QUESTIONNAIRE = "Pre-Event Questionnaire"
    POST_EVENT_QUESTIONNAIRE = "Post-Event Feedback & Testimonial"
    EVENT_TIMELINE = "Event Timeline Builder"


class EmailFollowUpType(str, enum.Enum):
    PRE_BOOKING = "Pre-booking Inquiry Response"
    POST_BOOKING = "Post-booking Confirmation"
    PRE_EVENT = "One Week Before Event Check-in"
    POST_EVENT = "Post-event Thank You & Review Request"
    REFERRAL_REQUEST = "Post-event Referral Request"


class OutputTone(str, enum.Enum):
    PROFESSIONAL = "Professional"
    FRIENDLY = "Friendly & Casual"
    ENERGETIC = "Energetic & Fun"
    CONCISE = "Concise & To-the-Point"


class RefinementAction(str, enum.Enum):
    MORE_PROFESSIONAL = "Make it more professional"
    MORE_CASUAL = "Make it more casual"
    SHORTER = "Make it shorter"
    MORE_ENERGY = "Add more energy"


class CreativeContentType(str, enum.Enum):
    MC_SCRIPTS = "Gig Assistant (MC Scripts)"
    SOCIAL_MEDIA_POST = "Social Media Post"
    BLOG_POST = "Blog Post for Website/SEO"
    AI_IMAGE = "AI Image for Social Media"
    AI_VIDEO = "AI Video for Social Media"


class McScriptType(str, enum.Enum):
    GRAND_ENTRANCE = "Grand Entrance"
    DINNER_INTRO = "Dinner Introduction"
    DANCE_FLOOR_OPENING = "Dance Floor Opening"
    PERSONALIZED_STORY = "Personalized Client Story"
    LAST_CALL = "Last Call / Wind Down"
    CLOSING_REMARKS = "Closing Remarks & Send-off"


class SocialMediaPlatform(str, enum.Enum):
    INSTAGRAM = "Instagram"
    FACEBOOK = "Facebook"
    TWITTER_X = "Twitter / X"


class PlaylistType(str, enum.Enum):
    DINNER = "Dinner Music"
    COCKTAIL_HOUR = "Cocktail Hour"
    OPEN_DANCING = "Open Dancing"
    CEREMONY = "Ceremony Selections"
    CUSTOM = "Custom Playlist"


class SalesObjectionType(str, enum.Enum):
    PRICE_TOO_HIGH = "My price is too high"
    CHEAPER_PACKAGE = "Do you have a cheaper package?"
    JUST_NEED_MUSIC = "I just need someone to play music"
    SPOTIFY_PLAYLIST = "Why not just use a Spotify playlist?"
    FRIEND_DJ = "My friend can DJ for free/cheap"
    NOT_SURE = "I need to think about it / talk to my partner"


class ImageAspectRatio(str, enum.Enum):
    SQUARE = "1:1"
    LANDSCAPE = "16:9"
    PORTRAIT = "4:3"


# Templates whose output is laid out for conversion into a questionnaire form.
FORM_TEMPLATE_TYPES = frozenset({
    TemplateType.EVENT_CHECKLIST,
    TemplateType.PRE_EVENT_QUESTIONNAIRE,
    TemplateType.POST_EVENT_QUESTIONNAIRE,
})
