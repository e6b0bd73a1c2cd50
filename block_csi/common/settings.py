OWNERSHIP_TAG = "Created by DigitalOcean CSI driver"

LISTING_FIRST_PAGE = 1

ALREADY_ATTACHED_MESSAGE = "already attached"
ATTACHMENT_NOT_FOUND_MESSAGE = "Attachment not found"
NOT_FOUND_MESSAGE = "not found"
