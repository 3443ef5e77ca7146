from .account_service import AccountService as AccountService
