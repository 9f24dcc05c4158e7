"""Service classes for LinkedIn REST API calls, sent through a caller-supplied Doer."""