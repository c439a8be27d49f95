"""Message templates and placeholder pools for payment-service logs."""

DEBUG_MESSAGES = [
    "Validating transaction request payload",
    "Fetching exchange rates from cache",
    "Checking user session token",
    "Preparing SQL statement for transaction insert",
    "Starting fraud detection analysis",
    "Encrypting sensitive payment data",
    "Validating webhook signature",
    "Processing payment method details",
    "Creating audit trail entry",
    "Calculating transaction fees",
    "Verifying merchant account status",
    "Loading payment gateway configuration",
    "Initializing PCI compliance checks",
    "Parsing customer billing address",
    "Generating unique transaction ID",
    "Checking currency conversion rates",
    "Validating CVV code format",
    "Creating payment intent object",
    "Setting up database connection pool",
    "Caching user payment preferences",
    "Compressing log data for storage",
    "Verifying API rate limits",
    "Loading risk assessment rules",
    "Initializing 3D Secure flow",
    "Processing refund eligibility check",
    "Validating webhook payload structure",
    "Creating payment confirmation email template",
    "Checking duplicate transaction prevention",
    "Loading country-specific tax rules",
    "Processing subscription billing cycle",
]

INFO_MESSAGES = [
    "Payment of $%AMOUNT% completed successfully for user %USER%",
    "Refund of $%AMOUNT% processed for order #%ORDER%",
    "Payment gateway responded in %TIME%ms",
    "New subscription created for %USER%",
    "Webhook sent to /api/payment/status",
    "User %USER% updated payment method",
    "Monthly subscription billing completed for %USER%",
    "Payment method verified successfully for %USER%",
    "Batch payment processing completed",
    "Currency conversion applied for international payment",
    "Payment dispute resolved in favor of merchant",
    "Recurring payment authorized for %USER%",
    "Payment gateway health check passed",
    "Daily transaction summary generated",
    "User %USER% completed KYC verification",
    "Payment reconciliation completed successfully",
    "New merchant account activated",
    "Payment webhook received and validated",
    "Subscription plan upgraded for %USER%",
    "Payment method tokenized successfully",
]

WARN_MESSAGES = [
    "Transaction delay detected: %TIME%ms latency",
    "Gateway returned HTTP 429 (rate limit)",
    "Payment queue length at %PERCENT%% capacity",
    "Retrying payment after temporary network error",
    "High response time detected in /api/pay",
    "Payment gateway timeout after %TIME%ms",
    "SSL certificate expiring in 30 days",
    "Database connection pool 80% utilized",
    "Cache miss rate increased to 15%",
    "Third-party API response time above threshold",
    "Payment retry attempt #%RETRY% for transaction",
    "Memory usage at 85% of allocated limit",
    "CDN response time degradation detected",
    "Webhook delivery delayed by %TIME%ms",
    "Payment method update required for %USER%",
    "Suspicious login attempt detected from new location",
    "Currency conversion rate stale by 5 minutes",
    "Backup process running longer than expected",
    "SSL handshake taking %TIME%ms to complete",
    "Database index fragmentation at 25%",
]

ERROR_MESSAGES = [
    "Transaction failed for %USER% - card declined",
    "Database error: duplicate transaction ID",
    "Critical: lost connection to payment gateway",
    "Payment signature verification failed for user %USER%",
    "Unhandled exception: %ERROR%",
    "Payment gateway authentication failed",
    "Database connection timeout after 30 seconds",
    "SSL certificate validation failed",
    "Webhook signature mismatch for incoming payment",
    "Fraud detection blocked suspicious transaction",
    "Payment processor API key expired",
    "Critical security violation detected",
    "Database deadlock in transactions table",
    "Payment data encryption failed",
    "Third-party service unavailable - payment processing halted",
    "Memory leak detected in payment processing module",
    "Critical file system error - cannot write audit logs",
    "Network partition detected - cannot reach primary database",
    "Payment reconciliation job failed with exception",
    "Security token service unavailable",
]

TEMPLATES = {
    "debug": DEBUG_MESSAGES,
    "info": INFO_MESSAGES,
    "warn": WARN_MESSAGES,
    "error": ERROR_MESSAGES,
}

EVENTS = {
    "error": ["PAYMENT_FAILURE", "SYSTEM_ERROR", "SECURITY_VIOLATION", "DATABASE_ERROR"],
    "warn": ["PERFORMANCE_ALERT", "CAPACITY_WARNING", "DEPRECATION_WARNING"],
    "info": ["PAYMENT_SUCCESS", "SUBSCRIPTION_CREATED", "USER_ACTION", "SYSTEM_HEALTH"],
    "debug": ["INTERNAL_OPERATION", "VALIDATION_STEP", "CACHE_OPERATION", "DATABASE_QUERY"],
}

HTTP_STATUS = {"debug": 200, "info": 200, "warn": 429, "error": 500}

TRANSACTION_STATUS = {
    "debug": "processing",
    "info": "completed",
    "warn": "pending",
    "error": "failed",
}

USERS = [
    "alice", "bob", "charlie", "diana", "eve", "frank", "grace", "henry",
    "ivy", "jack", "karen", "leo", "mia", "nathan", "olivia", "paul",
    "quincy", "rachel", "sam", "tina", "umar", "violet", "will", "xena",
    "yara", "zack", "amit", "bella", "carlos", "derek",
]

ERROR_CODES = [
    "ECONNRESET", "ETIMEOUT", "EACCESS", "UnknownError", "SQLIntegrityConstraintViolation",
    "SSLHandshakeException", "OutOfMemoryError", "NullPointerException", "StackOverflowError",
    "DatabaseConnectionException", "AuthenticationException", "AuthorizationException",
    "PaymentGatewayTimeout", "InvalidSignature", "FraudDetectionError", "EncryptionError",
    "WebhookDeliveryFailed", "RateLimitExceeded", "ServiceUnavailable", "ConfigurationError",
]

AMOUNTS = [5, 10, 25, 50, 100, 200, 500, 1000, 1500, 2000, 5000]

ORDERS = ["ORD001", "ORD002", "ORD003", "ORD004", "ORD005", "ORD006", "ORD007", "ORD008"]

BROWSER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_0 like Mac OS X) AppleWebKit/605.1.15",
]

CLIENT_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Stripe/v1 NodeBindings/10.0.0",
    "axios/1.4.0",
]
