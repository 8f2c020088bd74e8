"""
Private messages exporter.

Pages through the threads in the user's sent box and exports only the
messages the user wrote. Recipients are the other thread participants.
"""

from typing import Iterable, List

from bpdx.constants import COMPONENT_MESSAGES, MESSAGES_BATCH_SIZE
from bpdx.host.models import Thread, User
from .base_exporter import BaseExporter
from .models import ExportItem


class MessagesExporter(BaseExporter):
    key = "messages"
    component = COMPONENT_MESSAGES
    friendly_name = "BuddyPress Messages"
    group_id = "bp_messages"
    group_label_text = "Private Messages"
    batch_size = MESSAGES_BATCH_SIZE

    def fetch_records(self, user: User, page: int) -> List[Thread]:
        return self.host.get_sent_threads(
            user.id, self.offset_for(page), self.batch_size
        )

    def recipients_for(self, user: User, thread: Thread) -> str:
        return ", ".join(
            self.host.user_link(recipient.user_id)
            for recipient in thread.recipients
            if recipient.user_id != user.id
        )

    def build_items(self, user: User, record: Thread) -> Iterable[ExportItem]:
        recipients = self.recipients_for(user, record)
        thread_link = self.host.thread_url(record.thread_id, user.id)

        items = []
        for message in record.messages:
            if message.sender_id != user.id:
                continue

            item = self.new_item(f"bp-messages-{message.id}")
            item.add_field(self._("Message Subject"), message.subject)
            item.add_field(self._("Message Content"), message.message)
            item.add_field(self._("Date Sent"), message.date_sent)
            item.add_field(self._("Recipients"), recipients)
            item.add_field(self._("Thread URL"), thread_link)
            items.append(item)
        return items
