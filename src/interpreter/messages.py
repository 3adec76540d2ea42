"""Response text templates for the task interpreter."""

GREETING = """Hello! I'm your task tracker.
What can I do for you?"""

FAREWELL = "Bye. Hope to see you again soon!"

LIST_HEADER = "Here are the tasks in your list:"

EMPTY_LIST = "Your list is empty."

ADDED_TEMPLATE = """Got it. I've added this task:
  {task}
Now you have {count} tasks in the list."""

DONE_TEMPLATE = """Nice! I've marked this task as done:
  {task}"""

DELETED_TEMPLATE = """Noted. I've removed this task:
  {task}
Now you have {count} tasks in the list."""

FIND_HEADER = "Here are the matching tasks in your list:"

DATE_HEADER = "Here are the tasks taking place at the time you gave me:"

SAVE_ERROR = "Cannot save the data."
