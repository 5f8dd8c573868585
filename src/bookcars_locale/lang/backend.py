"""String catalogs of the admin/back-office site."""

from enum import Enum

from bookcars_locale.services.catalog import Catalog, Surface


class CarRangeFilterKey(str, Enum):
    RANGE = "RANGE"
    MINI = "MINI"
    MIDI = "MIDI"
    MAXI = "MAXI"
    SCOOTER = "SCOOTER"


car_range_filter = Catalog(
    "car-range-filter",
    CarRangeFilterKey,
    {
        "fr": {
            CarRangeFilterKey.RANGE: "Gamme",
            CarRangeFilterKey.MINI: "Mini",
            CarRangeFilterKey.MIDI: "Midi",
            CarRangeFilterKey.MAXI: "Maxi",
            CarRangeFilterKey.SCOOTER: "Scooter",
        },
        "en": {
            CarRangeFilterKey.RANGE: "Range",
            CarRangeFilterKey.MINI: "Petite voiture",
            CarRangeFilterKey.MIDI: "Voiture moyenne",
            CarRangeFilterKey.MAXI: "Grande voiture",
            CarRangeFilterKey.SCOOTER: "Scooter",
        },
    },
    surface=Surface.BACKEND,
)


class HeaderKey(str, Enum):
    DASHBOARD = "DASHBOARD"
    HOME = "HOME"
    COMPANIES = "COMPANIES"
    LOCATIONS = "LOCATIONS"
    CARS = "CARS"
    USERS = "USERS"
    STATS = "STATS"
    REVIEWS = "REVIEWS"
    ABOUT = "ABOUT"
    TOS = "TOS"
    CONTACT = "CONTACT"
    LANGUAGE = "LANGUAGE"
    SETTINGS = "SETTINGS"
    SIGN_OUT = "SIGN_OUT"
    COUNTRIES = "COUNTRIES"
    PRICING = "PRICING"
    SUBSCRIPTIONS = "SUBSCRIPTIONS"
    VERIFICATION = "VERIFICATION"
    ADMIN_VERIFICATION = "ADMIN_VERIFICATION"
    AGENCY_COMMISSIONS = "AGENCY_COMMISSIONS"


header = Catalog(
    "header",
    HeaderKey,
    {
        "fr": {
            HeaderKey.DASHBOARD: "Tableau de bord",
            HeaderKey.HOME: "Accueil",
            HeaderKey.COMPANIES: "Fournisseurs",
            HeaderKey.LOCATIONS: "Lieux",
            HeaderKey.CARS: "Voitures",
            HeaderKey.USERS: "Utilisateurs",
            HeaderKey.STATS: "Statistiques",
            HeaderKey.REVIEWS: "Avis",
            HeaderKey.ABOUT: "À propos",
            HeaderKey.TOS: "Conditions d'utilisation",
            HeaderKey.CONTACT: "Contact",
            HeaderKey.LANGUAGE: "Langue",
            HeaderKey.SETTINGS: "Paramètres",
            HeaderKey.SIGN_OUT: "Déconnexion",
            HeaderKey.COUNTRIES: "Pays",
            HeaderKey.PRICING: "Tarification",
            HeaderKey.SUBSCRIPTIONS: "Abonnements",
            HeaderKey.VERIFICATION: "Vérification agence",
            HeaderKey.ADMIN_VERIFICATION: "Documents agences",
            HeaderKey.AGENCY_COMMISSIONS: "Commissions agences",
        },
        "en": {
            HeaderKey.DASHBOARD: "Dashboard",
            HeaderKey.HOME: "Home",
            HeaderKey.COMPANIES: "Suppliers",
            HeaderKey.LOCATIONS: "Locations",
            HeaderKey.CARS: "Cars",
            HeaderKey.USERS: "Users",
            HeaderKey.ABOUT: "About",
            HeaderKey.STATS: "insights",
            HeaderKey.REVIEWS: "Avis",
            HeaderKey.TOS: "Terms of Service",
            HeaderKey.CONTACT: "Contact",
            HeaderKey.LANGUAGE: "Language",
            HeaderKey.SETTINGS: "Settings",
            HeaderKey.SIGN_OUT: "Sign out",
            HeaderKey.COUNTRIES: "Countries",
            HeaderKey.PRICING: "Pricing",
            HeaderKey.SUBSCRIPTIONS: "Subscriptions",
            HeaderKey.VERIFICATION: "Agency verification",
            HeaderKey.ADMIN_VERIFICATION: "Agency documents",
            HeaderKey.AGENCY_COMMISSIONS: "Agency commissions",
        },
    },
    surface=Surface.BACKEND,
)


class SignInKey(str, Enum):
    SIGN_IN_HEADING = "SIGN_IN_HEADING"
    SIGN_IN = "SIGN_IN"
    SIGN_UP = "SIGN_UP"
    ERROR_IN_SIGN_IN = "ERROR_IN_SIGN_IN"
    IS_BLACKLISTED_TITLE = "IS_BLACKLISTED_TITLE"
    IS_BLACKLISTED_HELP = "IS_BLACKLISTED_HELP"
    SUPPORT_EMAIL = "SUPPORT_EMAIL"
    RESET_PASSWORD = "RESET_PASSWORD"
    STAY_CONNECTED = "STAY_CONNECTED"


sign_in = Catalog(
    "sign-in",
    SignInKey,
    {
        "fr": {
            SignInKey.SIGN_IN_HEADING: "Connexion",
            SignInKey.SIGN_IN: "Se connecter",
            SignInKey.SIGN_UP: "S'inscrire",
            SignInKey.ERROR_IN_SIGN_IN: "E-mail ou mot de passe incorrect.",
            SignInKey.IS_BLACKLISTED_TITLE: "Votre compte est suspendu.",
            SignInKey.IS_BLACKLISTED_HELP: "Pour plus d’informations, contactez notre équipe à",
            SignInKey.SUPPORT_EMAIL: "contact@plany.tn",
            SignInKey.RESET_PASSWORD: "Mot de passe oublié ?",
            SignInKey.STAY_CONNECTED: "Rester connecté",
        },
        "en": {
            SignInKey.SIGN_IN_HEADING: "Sign in",
            SignInKey.SIGN_UP: "S'inscrire",
            SignInKey.SIGN_IN: "Sign in",
            SignInKey.ERROR_IN_SIGN_IN: "Incorrect email or password.",
            SignInKey.IS_BLACKLISTED_TITLE: "Your account is suspended.",
            SignInKey.IS_BLACKLISTED_HELP: "For more information, reach out to our team at",
            SignInKey.SUPPORT_EMAIL: "contact@plany.tn",
            SignInKey.RESET_PASSWORD: "Forgot password?",
            SignInKey.STAY_CONNECTED: "Stay connected",
        },
    },
    surface=Surface.BACKEND,
)


class NoMatchKey(str, Enum):
    NO_MATCH = "NO_MATCH"
    NO_MATCH_DESCRIPTION = "NO_MATCH_DESCRIPTION"


no_match = Catalog(
    "no-match",
    NoMatchKey,
    {
        "fr": {
            NoMatchKey.NO_MATCH: "Page non trouvée",
            NoMatchKey.NO_MATCH_DESCRIPTION: "La page que vous cherchez n'existe pas ou a été déplacée.",
        },
        "en": {
            NoMatchKey.NO_MATCH: "Page not found",
            NoMatchKey.NO_MATCH_DESCRIPTION: "The page you are looking for does not exist or has been moved.",
        },
    },
    surface=Surface.BACKEND,
)


class UserListKey(str, Enum):
    DELETE_USER = "DELETE_USER"
    DELETE_USERS = "DELETE_USERS"
    DELETE_SELECTION = "DELETE_SELECTION"
    BLACKLIST = "BLACKLIST"
    AGENCY_NOTES_TITLE = "AGENCY_NOTES_TITLE"
    AGENCY_NOTES_EMPTY = "AGENCY_NOTES_EMPTY"
    AGENCY_NOTES_ERROR = "AGENCY_NOTES_ERROR"
    AGENCY_NOTE_UNKNOWN_AUTHOR = "AGENCY_NOTE_UNKNOWN_AUTHOR"
    AGENCY_NOTE_TYPE_EMAIL = "AGENCY_NOTE_TYPE_EMAIL"
    AGENCY_NOTE_TYPE_SMS = "AGENCY_NOTE_TYPE_SMS"
    AGENCY_NOTE_TYPE_BLOCK = "AGENCY_NOTE_TYPE_BLOCK"
    AGENCY_NOTE_TYPE_UNBLOCK = "AGENCY_NOTE_TYPE_UNBLOCK"
    AGENCY_NOTE_TYPE_NOTE = "AGENCY_NOTE_TYPE_NOTE"


user_list = Catalog(
    "user-list",
    UserListKey,
    {
        "fr": {
            UserListKey.DELETE_USER: "Êtes-vous sûr de vouloir supprimer cet utilisateur et toutes ses données ?",
            UserListKey.DELETE_USERS: "Êtes-vous sûr de vouloir supprimer les utilisateurs sélectionnés et toutes leurs données ?",
            UserListKey.DELETE_SELECTION: "Supprimer les utilisateurs sélectionnés",
            UserListKey.BLACKLIST: "Ajouter à la liste noire",
            UserListKey.AGENCY_NOTES_TITLE: "Historique & notes",
            UserListKey.AGENCY_NOTES_EMPTY: "Aucune note n’a encore été enregistrée pour cette agence.",
            UserListKey.AGENCY_NOTES_ERROR: "Impossible de charger l’historique des notes pour cette agence.",
            UserListKey.AGENCY_NOTE_UNKNOWN_AUTHOR: "Administrateur inconnu",
            UserListKey.AGENCY_NOTE_TYPE_EMAIL: "Email",
            UserListKey.AGENCY_NOTE_TYPE_SMS: "SMS",
            UserListKey.AGENCY_NOTE_TYPE_BLOCK: "Blocage",
            UserListKey.AGENCY_NOTE_TYPE_UNBLOCK: "Déblocage",
            UserListKey.AGENCY_NOTE_TYPE_NOTE: "Note interne",
        },
        "en": {
            UserListKey.DELETE_USER: "Are you sure you want to delete this user and all his data?",
            UserListKey.DELETE_USERS: "Are you sure you want to delete the selected users and all their data?",
            UserListKey.DELETE_SELECTION: "Delete selectied users",
            UserListKey.BLACKLIST: "Add to the blacklist",
            UserListKey.AGENCY_NOTES_TITLE: "History & notes",
            UserListKey.AGENCY_NOTES_EMPTY: "No notes have been recorded for this agency yet.",
            UserListKey.AGENCY_NOTES_ERROR: "Unable to load the note history for this agency.",
            UserListKey.AGENCY_NOTE_UNKNOWN_AUTHOR: "Unknown admin",
            UserListKey.AGENCY_NOTE_TYPE_EMAIL: "Email",
            UserListKey.AGENCY_NOTE_TYPE_SMS: "SMS",
            UserListKey.AGENCY_NOTE_TYPE_BLOCK: "Block",
            UserListKey.AGENCY_NOTE_TYPE_UNBLOCK: "Unblock",
            UserListKey.AGENCY_NOTE_TYPE_NOTE: "Internal note",
        },
    },
    surface=Surface.BACKEND,
)


class CommissionAgreementKey(str, Enum):
    TITLE = "TITLE"
    INTRO = "INTRO"
    COLLECTION = "COLLECTION"
    CARRY_OVER = "CARRY_OVER"
    EXAMPLE_TITLE = "EXAMPLE_TITLE"
    EXAMPLE_BASE = "EXAMPLE_BASE"
    EXAMPLE_CLIENT = "EXAMPLE_CLIENT"
    EXAMPLE_PAYMENT = "EXAMPLE_PAYMENT"
    EXAMPLE_REMIT = "EXAMPLE_REMIT"
    EXAMPLE_FOOTER = "EXAMPLE_FOOTER"
    CALLOUT_INCLUDED = "CALLOUT_INCLUDED"
    CALLOUT_FLOW = "CALLOUT_FLOW"
    ACCEPT = "ACCEPT"
    VIEW_POLICY = "VIEW_POLICY"
    ACCEPT_ERROR = "ACCEPT_ERROR"


commission_agreement = Catalog(
    "commission-agreement",
    CommissionAgreementKey,
    {
        "fr": {
            CommissionAgreementKey.TITLE: "Commission Plany sur les réservations",
            CommissionAgreementKey.INTRO: "À partir du {date}, Plany appliquera une commission de {percent}% sur le prix de chaque réservation.",
            CommissionAgreementKey.COLLECTION: "Cette commission est récupérée auprès du client au moment du paiement et versée mensuellement à Plany lorsque le total des commissions du mois dépasse {threshold}.",
            CommissionAgreementKey.CARRY_OVER: "Si le total mensuel est inférieur au seuil, le montant est reporté jusqu’à atteindre le seuil.",
            CommissionAgreementKey.EXAMPLE_TITLE: "Exemple :",
            CommissionAgreementKey.EXAMPLE_BASE: "Prix de location saisi par l’agence : {amount}",
            CommissionAgreementKey.EXAMPLE_CLIENT: "Prix affiché au client : {amount} ({base} + {percent}%)",
            CommissionAgreementKey.EXAMPLE_PAYMENT: "Ce que le client vous paie : {amount}",
            CommissionAgreementKey.EXAMPLE_REMIT: "Ce que vous reversez à Plany : {amount} (soit {percent}% de {base})",
            CommissionAgreementKey.EXAMPLE_FOOTER: "Le reversement s’effectue en fin de mois si le total des commissions atteint {threshold} (sinon, report au mois suivant).",
            CommissionAgreementKey.CALLOUT_INCLUDED: "Le prix affiché au client inclut la commission Plany.",
            CommissionAgreementKey.CALLOUT_FLOW: "Vous encaissez d’abord le total (prix + commission) ; vous reversez ensuite la commission à Plany.",
            CommissionAgreementKey.ACCEPT: "Accepter",
            CommissionAgreementKey.VIEW_POLICY: "Voir la politique des commissions",
            CommissionAgreementKey.ACCEPT_ERROR: "Une erreur est survenue lors de l’enregistrement de votre accord.",
        },
        "en": {
            CommissionAgreementKey.TITLE: "Plany booking commission",
            CommissionAgreementKey.INTRO: "Starting {date}, Plany will apply a {percent}% commission to every booking price.",
            CommissionAgreementKey.COLLECTION: "The commission is collected from the client at payment and transferred to Plany each month once the total commissions exceed {threshold}.",
            CommissionAgreementKey.CARRY_OVER: "If the monthly total is below the threshold, the amount is carried forward until the threshold is reached.",
            CommissionAgreementKey.EXAMPLE_TITLE: "Example:",
            CommissionAgreementKey.EXAMPLE_BASE: "Price entered by the agency: {amount}",
            CommissionAgreementKey.EXAMPLE_CLIENT: "Price shown to the client: {amount} ({base} + {percent}%)",
            CommissionAgreementKey.EXAMPLE_PAYMENT: "Amount paid to you by the client: {amount}",
            CommissionAgreementKey.EXAMPLE_REMIT: "Amount you remit to Plany: {amount} ({percent}% of {base})",
            CommissionAgreementKey.EXAMPLE_FOOTER: "The transfer takes place at the end of the month when commissions reach {threshold} (otherwise it is carried forward).",
            CommissionAgreementKey.CALLOUT_INCLUDED: "The client-facing price already includes Plany’s commission.",
            CommissionAgreementKey.CALLOUT_FLOW: "You collect the total amount first (price + commission) and then transfer the commission to Plany.",
            CommissionAgreementKey.ACCEPT: "Accept",
            CommissionAgreementKey.VIEW_POLICY: "View the commission policy",
            CommissionAgreementKey.ACCEPT_ERROR: "We could not record your acceptance. Please try again.",
        },
        "es": {
            CommissionAgreementKey.TITLE: "Comisión de Plany sobre las reservas",
            CommissionAgreementKey.INTRO: "A partir del {date}, Plany aplicará una comisión del {percent}% sobre el precio de cada reserva.",
            CommissionAgreementKey.COLLECTION: "Esta comisión se cobra al cliente en el momento del pago y se transfiere a Plany mensualmente cuando el total del mes supera {threshold}.",
            CommissionAgreementKey.CARRY_OVER: "Si el total mensual es inferior al umbral, el importe se acumula hasta alcanzarlo.",
            CommissionAgreementKey.EXAMPLE_TITLE: "Ejemplo:",
            CommissionAgreementKey.EXAMPLE_BASE: "Precio introducido por la agencia: {amount}",
            CommissionAgreementKey.EXAMPLE_CLIENT: "Precio mostrado al cliente: {amount} ({base} + {percent}%)",
            CommissionAgreementKey.EXAMPLE_PAYMENT: "Lo que paga el cliente: {amount}",
            CommissionAgreementKey.EXAMPLE_REMIT: "Lo que transfieres a Plany: {amount} ({percent}% de {base})",
            CommissionAgreementKey.EXAMPLE_FOOTER: "La transferencia se realiza a fin de mes cuando las comisiones alcanzan {threshold} (de lo contrario, se acumulan).",
            CommissionAgreementKey.CALLOUT_INCLUDED: "El precio mostrado al cliente incluye la comisión de Plany.",
            CommissionAgreementKey.CALLOUT_FLOW: "Cobras primero el total (precio + comisión) y después transfieres la comisión a Plany.",
            CommissionAgreementKey.ACCEPT: "Aceptar",
            CommissionAgreementKey.VIEW_POLICY: "Ver la política de comisiones",
            CommissionAgreementKey.ACCEPT_ERROR: "No se pudo registrar tu aceptación. Inténtalo de nuevo.",
        },
    },
    surface=Surface.BACKEND,
)


CATALOGS: tuple[Catalog, ...] = (
    car_range_filter,
    commission_agreement,
    header,
    no_match,
    sign_in,
    user_list,
)
