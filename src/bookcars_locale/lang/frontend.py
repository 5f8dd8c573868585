"""String catalogs of the customer-facing booking site."""

from datetime import date
from enum import Enum

from bookcars_locale.config.settings import Settings
from bookcars_locale.services.catalog import Catalog, Surface


def _copyright_part1() -> str:
    return f"Copyright © {date.today().year} Plany"


class BookingsKey(str, Enum):
    NEW_BOOKING = "NEW_BOOKING"
    SUPPLIERS_LOADING = "SUPPLIERS_LOADING"
    SUPPLIERS_ERROR = "SUPPLIERS_ERROR"
    SUPPLIERS_RETRY = "SUPPLIERS_RETRY"
    SUPPLIERS_EMPTY = "SUPPLIERS_EMPTY"


bookings = Catalog(
    "bookings",
    BookingsKey,
    {
        "fr": {
            BookingsKey.NEW_BOOKING: "Nouvelle réservation",
            BookingsKey.SUPPLIERS_LOADING: "Chargement des agences en cours... merci de patienter.",
            BookingsKey.SUPPLIERS_ERROR: "Impossible de charger les agences pour le moment.",
            BookingsKey.SUPPLIERS_RETRY: "Réessayer",
            BookingsKey.SUPPLIERS_EMPTY: "Aucune agence disponible pour le moment.",
        },
        "en": {
            BookingsKey.NEW_BOOKING: "New Booking",
            BookingsKey.SUPPLIERS_LOADING: "Loading suppliers... please wait.",
            BookingsKey.SUPPLIERS_ERROR: "Unable to load suppliers right now.",
            BookingsKey.SUPPLIERS_RETRY: "Retry",
            BookingsKey.SUPPLIERS_EMPTY: "No suppliers are available right now.",
        },
        "es": {
            BookingsKey.NEW_BOOKING: "Nueva reserva",
            BookingsKey.SUPPLIERS_LOADING: "Cargando agencias... por favor espere.",
            BookingsKey.SUPPLIERS_ERROR: "No se pueden cargar las agencias en este momento.",
            BookingsKey.SUPPLIERS_RETRY: "Reintentar",
            BookingsKey.SUPPLIERS_EMPTY: "No hay agencias disponibles por ahora.",
        },
    },
    surface=Surface.FRONTEND,
)


class CarRangeFilterKey(str, Enum):
    RANGE = "RANGE"
    MINI = "MINI"
    MIDI = "MIDI"
    MAXI = "MAXI"
    SCOOTER = "SCOOTER"


# fr/en values are swapped relative to the back-office catalog of the same
# group; reported by services.audit, left as authored.
car_range_filter = Catalog(
    "car-range-filter",
    CarRangeFilterKey,
    {
        "fr": {
            CarRangeFilterKey.RANGE: "Gamme",
            CarRangeFilterKey.MINI: "Petite voiture",
            CarRangeFilterKey.MIDI: "Voiture moyenne",
            CarRangeFilterKey.MAXI: "Grande voiture",
            CarRangeFilterKey.SCOOTER: "Scooter",
        },
        "en": {
            CarRangeFilterKey.RANGE: "Range",
            CarRangeFilterKey.MINI: "Mini",
            CarRangeFilterKey.MIDI: "Midi",
            CarRangeFilterKey.MAXI: "Maxi",
            CarRangeFilterKey.SCOOTER: "Scooter",
        },
        "es": {
            CarRangeFilterKey.RANGE: "Gama",
            CarRangeFilterKey.MINI: "Mini",
            CarRangeFilterKey.MIDI: "Midi",
            CarRangeFilterKey.MAXI: "Maxi",
            CarRangeFilterKey.SCOOTER: "Scooter",
        },
    },
    surface=Surface.FRONTEND,
)


class SearchKey(str, Enum):
    VIEW_ON_MAP = "VIEW_ON_MAP"
    SEARCH_LOADING = "SEARCH_LOADING"
    SEARCH_ERROR_SUPPLIERS = "SEARCH_ERROR_SUPPLIERS"
    SEARCH_ERROR_GENERIC = "SEARCH_ERROR_GENERIC"


search = Catalog(
    "search",
    SearchKey,
    {
        "fr": {
            SearchKey.VIEW_ON_MAP: "Voir sur la carte",
            SearchKey.SEARCH_LOADING: "Merci de patienter pendant la préparation des offres.",
            SearchKey.SEARCH_ERROR_SUPPLIERS: "Impossible de charger les fournisseurs pour le moment.",
            SearchKey.SEARCH_ERROR_GENERIC: "Une erreur est survenue lors du chargement de la recherche.",
        },
        "en": {
            SearchKey.VIEW_ON_MAP: "View on map",
            SearchKey.SEARCH_LOADING: "Hold on while we prepare the best offers.",
            SearchKey.SEARCH_ERROR_SUPPLIERS: "Unable to load suppliers right now.",
            SearchKey.SEARCH_ERROR_GENERIC: "Something went wrong while loading your search.",
        },
    },
    surface=Surface.FRONTEND,
)


class FooterKey(str, Enum):
    COPYRIGHT_PART1 = "COPYRIGHT_PART1"
    COPYRIGHT_PART2 = "COPYRIGHT_PART2"
    CORPORATE = "CORPORATE"
    ABOUT = "ABOUT"
    TOS = "TOS"
    PRIVACY = "PRIVACY"
    RENT = "RENT"
    SUPPLIERS = "SUPPLIERS"
    LOCATIONS = "LOCATIONS"
    SUPPORT = "SUPPORT"
    CONTACT = "CONTACT"
    SECURE_PAYMENT = "SECURE_PAYMENT"


footer = Catalog(
    "footer",
    FooterKey,
    {
        "fr": {
            FooterKey.COPYRIGHT_PART1: _copyright_part1,
            FooterKey.COPYRIGHT_PART2: ". Tous droits réservés.",
            FooterKey.CORPORATE: "À Propos",
            FooterKey.ABOUT: "À propos de Nous",
            FooterKey.TOS: "Conditions d'utilisation",
            FooterKey.PRIVACY: "Politique de Confidentialité",
            FooterKey.RENT: "Louer une Voiture",
            FooterKey.SUPPLIERS: "Fournisseurs",
            FooterKey.LOCATIONS: "Lieux",
            FooterKey.SUPPORT: "Support",
            FooterKey.CONTACT: "Contact",
            FooterKey.SECURE_PAYMENT: "Paiement 100% sécurisé avec Plany",
        },
        "en": {
            FooterKey.COPYRIGHT_PART1: _copyright_part1,
            FooterKey.COPYRIGHT_PART2: ". All rights reserved.",
            FooterKey.CORPORATE: "Corporate",
            FooterKey.ABOUT: "About Us",
            FooterKey.TOS: "Terms of Service",
            FooterKey.PRIVACY: "Politique de Confidentialité",
            FooterKey.RENT: "Rent a Car",
            FooterKey.SUPPLIERS: "Suppliers",
            FooterKey.LOCATIONS: "Locations",
            FooterKey.SUPPORT: "Support",
            FooterKey.CONTACT: "Contact",
            FooterKey.SECURE_PAYMENT: "100% secure payment with Plany",
        },
        "es": {
            FooterKey.COPYRIGHT_PART1: _copyright_part1,
            FooterKey.COPYRIGHT_PART2: ". Todos los derechos reservados.",
            FooterKey.CORPORATE: "Corporativo",
            FooterKey.ABOUT: "Sobre Nosotros",
            FooterKey.TOS: "Términos de Servicio",
            FooterKey.RENT: "Alquilar un Coche",
            FooterKey.SUPPLIERS: "Proveedores",
            FooterKey.LOCATIONS: "Ubicaciones",
            FooterKey.SUPPORT: "Soporte",
            FooterKey.CONTACT: "Contacto",
            FooterKey.SECURE_PAYMENT: "Pago 100% seguro con Plany",
        },
    },
    surface=Surface.FRONTEND,
)


class ActivateKey(str, Enum):
    ACTIVATE_HEADING = "ACTIVATE_HEADING"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    ACTIVATE = "ACTIVATE"
    LINK_CHECKING = "LINK_CHECKING"
    LINK_INVALID = "LINK_INVALID"
    LINK_READY = "LINK_READY"


activate = Catalog(
    "activate",
    ActivateKey,
    {
        "fr": {
            ActivateKey.ACTIVATE_HEADING: "Activation du compte",
            ActivateKey.TOKEN_EXPIRED: "Votre lien d'activation du compte a expiré.",
            ActivateKey.ACTIVATE: "Activer",
            ActivateKey.LINK_CHECKING: "Vérification du lien en cours...",
            ActivateKey.LINK_INVALID: "Ce lien est invalide ou expiré.",
            ActivateKey.LINK_READY: "Votre lien est valide, vous pouvez définir votre mot de passe.",
        },
        "en": {
            ActivateKey.ACTIVATE_HEADING: "Account Activation",
            ActivateKey.TOKEN_EXPIRED: "Your account activation link expired.",
            ActivateKey.ACTIVATE: "Activate",
            ActivateKey.LINK_CHECKING: "Checking your link...",
            ActivateKey.LINK_INVALID: "This link is invalid or expired.",
            ActivateKey.LINK_READY: "Your link is valid, you can set your password.",
        },
        "es": {
            ActivateKey.ACTIVATE_HEADING: "Activación de la cuenta",
            ActivateKey.TOKEN_EXPIRED: "El enlace de activación de su cuenta ha expirado.",
            ActivateKey.ACTIVATE: "Activar",
            ActivateKey.LINK_CHECKING: "Verificando el enlace...",
            ActivateKey.LINK_INVALID: "Este enlace no es válido o ha caducado.",
            ActivateKey.LINK_READY: "Su enlace es válido, puede definir su contraseña.",
        },
    },
    surface=Surface.FRONTEND,
)


class ResetPasswordKey(str, Enum):
    RESET_PASSWORD_HEADING = "RESET_PASSWORD_HEADING"
    RESET_PASSWORD = "RESET_PASSWORD"
    EMAIL_ERROR = "EMAIL_ERROR"
    RESET = "RESET"
    EMAIL_SENT = "EMAIL_SENT"
    LINK_CHECKING = "LINK_CHECKING"
    LINK_INVALID = "LINK_INVALID"
    LINK_READY = "LINK_READY"


reset_password = Catalog(
    "reset-password",
    ResetPasswordKey,
    {
        "fr": {
            ResetPasswordKey.RESET_PASSWORD_HEADING: "Réinitialisation du mot de passe",
            ResetPasswordKey.RESET_PASSWORD: "Veuillez saisir votre adresse e-mail afin de vous envoyer un e-mail pour réinitialiser votre mot de passe.",
            ResetPasswordKey.EMAIL_ERROR: "Adresse e-mail non enregistrée",
            ResetPasswordKey.RESET: "Réinitialiser",
            ResetPasswordKey.EMAIL_SENT: "E-mail de réinitialisation du mot de passe envoyé.",
            ResetPasswordKey.LINK_CHECKING: "Vérification du lien de réinitialisation...",
            ResetPasswordKey.LINK_INVALID: "Le lien est invalide ou expiré.",
            ResetPasswordKey.LINK_READY: "Lien vérifié, vous pouvez réinitialiser votre mot de passe.",
        },
        "en": {
            ResetPasswordKey.RESET_PASSWORD_HEADING: "Password Reset",
            ResetPasswordKey.RESET_PASSWORD: "Please enter your email address so we can send you an email to reset your password.",
            ResetPasswordKey.EMAIL_ERROR: "Email address not registered",
            ResetPasswordKey.RESET: "Reset",
            ResetPasswordKey.EMAIL_SENT: "Password reset email sent.",
            ResetPasswordKey.LINK_CHECKING: "Checking the reset link...",
            ResetPasswordKey.LINK_INVALID: "This link is invalid or expired.",
            ResetPasswordKey.LINK_READY: "Link verified, you can reset your password.",
        },
    },
    surface=Surface.FRONTEND,
)


class SignUpKey(str, Enum):
    SIGN_UP_HEADING = "SIGN_UP_HEADING"
    SIGN_UP = "SIGN_UP"
    SIGN_UP_ERROR = "SIGN_UP_ERROR"
    AGENCY_SIGNUP_INFO = "AGENCY_SIGNUP_INFO"
    AGENCY_SIGNUP_BUTTON = "AGENCY_SIGNUP_BUTTON"


sign_up = Catalog(
    "sign-up",
    SignUpKey,
    {
        "fr": {
            SignUpKey.SIGN_UP_HEADING: "Inscription",
            SignUpKey.SIGN_UP: "S'inscrire",
            SignUpKey.SIGN_UP_ERROR: "Une erreur s'est produite lors de l'inscription.",
            SignUpKey.AGENCY_SIGNUP_INFO: "Vous êtes une agence ? Accédez à la plateforme dédiée.",
            SignUpKey.AGENCY_SIGNUP_BUTTON: "Inscrire mon agence",
        },
        "en": {
            SignUpKey.SIGN_UP_HEADING: "Sign up",
            SignUpKey.SIGN_UP: "Sign up",
            SignUpKey.SIGN_UP_ERROR: "An error occurred during sign up.",
            SignUpKey.AGENCY_SIGNUP_INFO: "Are you an agency? Switch to the dedicated portal.",
            SignUpKey.AGENCY_SIGNUP_BUTTON: "Register as an agency",
        },
    },
    surface=Surface.FRONTEND,
)


class NotificationsKey(str, Enum):
    EMPTY_LIST = "EMPTY_LIST"
    LOADING = "LOADING"
    FETCH_ERROR = "FETCH_ERROR"
    RETRY = "RETRY"
    REFRESH = "REFRESH"
    VIEW = "VIEW"
    MARK_AS_READ = "MARK_AS_READ"
    MARK_AS_UNREAD = "MARK_AS_UNREAD"
    MARK_ALL_AS_READ = "MARK_ALL_AS_READ"
    MARK_ALL_AS_UNREAD = "MARK_ALL_AS_UNREAD"
    DELETE_ALL = "DELETE_ALL"
    DELETE_NOTIFICATION = "DELETE_NOTIFICATION"
    DELETE_NOTIFICATIONS = "DELETE_NOTIFICATIONS"


notifications = Catalog(
    "notifications",
    NotificationsKey,
    {
        "fr": {
            NotificationsKey.EMPTY_LIST: "Pas de notifications",
            NotificationsKey.LOADING: "Chargement des notifications...",
            NotificationsKey.FETCH_ERROR: "Une erreur est survenue lors du chargement des notifications.",
            NotificationsKey.RETRY: "Réessayer",
            NotificationsKey.REFRESH: "Actualiser",
            NotificationsKey.VIEW: "Consulter",
            NotificationsKey.MARK_AS_READ: "Marquer comme lu",
            NotificationsKey.MARK_AS_UNREAD: "Marquer comme non lu",
            NotificationsKey.MARK_ALL_AS_READ: "Tout marquer comme lu",
            NotificationsKey.MARK_ALL_AS_UNREAD: "Tout marquer comme non lu",
            NotificationsKey.DELETE_ALL: "Tout supprimer",
            NotificationsKey.DELETE_NOTIFICATION: "Êtes-vous sûr de vouloir supprimer cette notification ?",
            NotificationsKey.DELETE_NOTIFICATIONS: "Êtes-vous sûr de vouloir supprimer ces notifications ?",
        },
        "en": {
            NotificationsKey.EMPTY_LIST: "No notifications",
            NotificationsKey.LOADING: "Loading notifications...",
            NotificationsKey.FETCH_ERROR: "Something went wrong while loading notifications.",
            NotificationsKey.RETRY: "Retry",
            NotificationsKey.REFRESH: "Refresh",
            NotificationsKey.VIEW: "View",
            NotificationsKey.MARK_AS_READ: "Mark as read",
            NotificationsKey.MARK_AS_UNREAD: "Mark as unread",
            NotificationsKey.MARK_ALL_AS_READ: "Mark all as read",
            NotificationsKey.MARK_ALL_AS_UNREAD: "Mark all as unread",
            NotificationsKey.DELETE_ALL: "Delete all",
            NotificationsKey.DELETE_NOTIFICATION: "Are you sure you want to delete this notification?",
            NotificationsKey.DELETE_NOTIFICATIONS: "Are you sure you want to delete these notifications?",
        },
    },
    surface=Surface.FRONTEND,
)


class ContactFormKey(str, Enum):
    CONTACT_HEADING = "CONTACT_HEADING"
    CTA = "CTA"
    SUBJECT = "SUBJECT"
    MESSAGE = "MESSAGE"
    SEND = "SEND"
    MESSAGE_SENT = "MESSAGE_SENT"
    EMPTY_STATE = "EMPTY_STATE"
    RECAPTCHA_DISABLED = "RECAPTCHA_DISABLED"


contact_form = Catalog(
    "contact-form",
    ContactFormKey,
    {
        "fr": {
            ContactFormKey.CONTACT_HEADING: "Contact",
            ContactFormKey.CTA: "Nous répondons rapidement à toutes vos questions mobilité.",
            ContactFormKey.SUBJECT: "Objet",
            ContactFormKey.MESSAGE: "Message",
            ContactFormKey.SEND: "Envoyer",
            ContactFormKey.MESSAGE_SENT: "Message envoyé",
            ContactFormKey.EMPTY_STATE: "Merci de renseigner l'objet et le message pour continuer.",
            ContactFormKey.RECAPTCHA_DISABLED: "Protection anti-robot indisponible pour le moment. Contactez-nous par e-mail.",
        },
        "en": {
            ContactFormKey.CONTACT_HEADING: "Contact",
            ContactFormKey.CTA: "We reply quickly to every mobility question.",
            ContactFormKey.SUBJECT: "Subject",
            ContactFormKey.MESSAGE: "Message",
            ContactFormKey.SEND: "Send",
            ContactFormKey.MESSAGE_SENT: "Message sent",
            ContactFormKey.EMPTY_STATE: "Please provide a subject and message to continue.",
            ContactFormKey.RECAPTCHA_DISABLED: "Anti-bot protection is unavailable. Please reach out via email.",
        },
        "el": {
            ContactFormKey.CONTACT_HEADING: "Επικοινωνία",
            ContactFormKey.CTA: "Απαντάμε άμεσα σε κάθε απορία μετακίνησης.",
            ContactFormKey.SUBJECT: "Θέμα",
            ContactFormKey.MESSAGE: "Μήνυμα",
            ContactFormKey.SEND: "Στείλετε",
            ContactFormKey.MESSAGE_SENT: "Το μήνυμα στάλθηκε",
            ContactFormKey.EMPTY_STATE: "Συμπληρώστε θέμα και μήνυμα για να συνεχίσετε.",
            ContactFormKey.RECAPTCHA_DISABLED: "Η προστασία bot δεν είναι διαθέσιμη. Επικοινωνήστε μέσω email.",
        },
        "es": {
            ContactFormKey.CONTACT_HEADING: "Contacto",
            ContactFormKey.CTA: "Respondemos rápido a cualquier duda sobre movilidad.",
            ContactFormKey.SUBJECT: "Asunto",
            ContactFormKey.MESSAGE: "Mensaje",
            ContactFormKey.SEND: "Enviar",
            ContactFormKey.MESSAGE_SENT: "Mensaje enviado",
            ContactFormKey.EMPTY_STATE: "Indique asunto y mensaje para continuar.",
            ContactFormKey.RECAPTCHA_DISABLED: "Protección anti-bot no disponible. Contáctenos por email.",
        },
    },
    surface=Surface.FRONTEND,
)


class HomeKey(str, Enum):
    PICK_UP_DATE = "PICK_UP_DATE"
    DROP_OFF_DATE = "DROP_OFF_DATE"
    DROP_OFF = "DROP_OFF"
    COVER = "COVER"
    SUPPLIERS_TITLE = "SUPPLIERS_TITLE"
    MAP_TITLE = "MAP_TITLE"
    MAP_PICK_UP_SELECTED = "MAP_PICK_UP_SELECTED"
    MAP_DROP_OFF_SELECTED = "MAP_DROP_OFF_SELECTED"
    DESTINATIONS_TITLE = "DESTINATIONS_TITLE"
    CAR_SIZE_TITLE = "CAR_SIZE_TITLE"
    CAR_SIZE_TEXT = "CAR_SIZE_TEXT"
    MINI = "MINI"
    MIDI = "MIDI"
    MAXI = "MAXI"
    SEARCH_FOR_CAR = "SEARCH_FOR_CAR"
    AGENCY_VERIFICATION_REMINDER_MESSAGE = "AGENCY_VERIFICATION_REMINDER_MESSAGE"
    AGENCY_VERIFICATION_REMINDER_BUTTON = "AGENCY_VERIFICATION_REMINDER_BUTTON"


home = Catalog(
    "home",
    HomeKey,
    {
        "fr": {
            HomeKey.PICK_UP_DATE: "Date de prise en charge",
            HomeKey.DROP_OFF_DATE: "Date de retour",
            HomeKey.DROP_OFF: "Restituer au même endroit",
            HomeKey.COVER: "Les meilleurs agences de location de voitures",
            HomeKey.SUPPLIERS_TITLE: "Nos agences partenaires",
            HomeKey.MAP_TITLE: "Découvrez les meilleures agences de location de voitures en tunisie.",
            HomeKey.MAP_PICK_UP_SELECTED: "Lieu de prise en charge sélectionné",
            HomeKey.MAP_DROP_OFF_SELECTED: "Lieu de restitution sélectionné",
            HomeKey.DESTINATIONS_TITLE: "Parcourir par destinations",
            HomeKey.CAR_SIZE_TITLE: "Découvrez nos catégories de véhicules",
            HomeKey.CAR_SIZE_TEXT: "Nous proposons des véhicules de tailles variées pour répondre à toutes vos envies, du trajet urbain au grand voyage",
            HomeKey.MINI: "Petite voiture",
            HomeKey.MIDI: "Voiture moyenne",
            HomeKey.MAXI: "Grande voiture",
            HomeKey.SEARCH_FOR_CAR: "Rechercher une voiture",
            HomeKey.AGENCY_VERIFICATION_REMINDER_MESSAGE: "Votre agence n'a pas encore envoyé ses documents de vérification. Déposez-les dès maintenant pour renforcer votre crédibilité, améliorer votre visibilité sur Plany.tn et accélérer la validation de vos réservations.",
            HomeKey.AGENCY_VERIFICATION_REMINDER_BUTTON: "Envoyer mes documents",
        },
        "en": {
            HomeKey.PICK_UP_DATE: "Pick-up Date",
            HomeKey.DROP_OFF_DATE: "Drop-off Date",
            HomeKey.DROP_OFF: "Return to same location",
            HomeKey.COVER: "Top Car Rental Companies",
            HomeKey.SUPPLIERS_TITLE: "Connecting you to the Biggest Brands",
            HomeKey.MAP_TITLE: "Map of Car Rental Locations",
            HomeKey.MAP_PICK_UP_SELECTED: "Pick-up Location selected",
            HomeKey.MAP_DROP_OFF_SELECTED: "Drop-off Location selected",
            HomeKey.DESTINATIONS_TITLE: "Browse by Destinations",
            HomeKey.CAR_SIZE_TITLE: "Meet Some of Our Car sizes",
            HomeKey.CAR_SIZE_TEXT: "Our vehicles come in three main sizes.",
            HomeKey.MINI: "MINI",
            HomeKey.MIDI: "MIDI",
            HomeKey.MAXI: "MAXI",
            HomeKey.SEARCH_FOR_CAR: "Search for a car",
            HomeKey.AGENCY_VERIFICATION_REMINDER_MESSAGE: "Your agency has not submitted its verification documents yet. Upload them now to build trust, boost your visibility on Plany.tn, and speed up the approval of your bookings.",
            HomeKey.AGENCY_VERIFICATION_REMINDER_BUTTON: "Upload my documents",
        },
        "es": {
            HomeKey.PICK_UP_DATE: "Fecha de recogida",
            HomeKey.DROP_OFF_DATE: "Fecha de devolución",
            HomeKey.DROP_OFF: "Devolver en el mismo lugar",
            HomeKey.COVER: "Las mejores empresas de alquiler de coches",
            HomeKey.SUPPLIERS_TITLE: "Conectándote con las marcas más grandes",
            HomeKey.MAP_TITLE: "Mapa de ubicaciones de alquiler de coches",
            HomeKey.MAP_PICK_UP_SELECTED: "Ubicación de recogida seleccionada",
            HomeKey.MAP_DROP_OFF_SELECTED: "Ubicación de devolución seleccionada",
            HomeKey.DESTINATIONS_TITLE: "Buscar por destinos",
            HomeKey.CAR_SIZE_TITLE: "Descubre algunos de nuestros tamaños de coches",
            HomeKey.CAR_SIZE_TEXT: "Nuestros vehículos están disponibles en tres tamaños principales.",
            HomeKey.MINI: "MINI",
            HomeKey.MIDI: "MIDI",
            HomeKey.MAXI: "MAXI",
            HomeKey.SEARCH_FOR_CAR: "Buscar un coche",
            HomeKey.AGENCY_VERIFICATION_REMINDER_MESSAGE: "Tu agencia aún no ha enviado sus documentos de verificación. Súbelos ahora para reforzar tu credibilidad, aumentar tu visibilidad en Plany.tn y acelerar la aprobación de tus reservas.",
            HomeKey.AGENCY_VERIFICATION_REMINDER_BUTTON: "Enviar mis documentos",
        },
    },
    surface=Surface.FRONTEND,
)


class LocationCarrouselKey(str, Enum):
    SELECT_LOCATION = "SELECT_LOCATION"
    AVALIABLE_LOCATION = "AVALIABLE_LOCATION"
    AVALIABLE_LOCATIONS = "AVALIABLE_LOCATIONS"
    LOADING = "LOADING"
    EMPTY_STATE = "EMPTY_STATE"
    ARIA_LABEL = "ARIA_LABEL"


location_carrousel = Catalog(
    "location-carrousel",
    LocationCarrouselKey,
    {
        "fr": {
            LocationCarrouselKey.SELECT_LOCATION: "Choisir ce lieu",
            LocationCarrouselKey.AVALIABLE_LOCATION: "lieu disponible",
            LocationCarrouselKey.AVALIABLE_LOCATIONS: "lieux disponibles",
            LocationCarrouselKey.LOADING: "Chargement des emplacements...",
            LocationCarrouselKey.EMPTY_STATE: "Aucun lieu disponible pour le moment.",
            LocationCarrouselKey.ARIA_LABEL: "Destinations populaires",
        },
        "en": {
            LocationCarrouselKey.SELECT_LOCATION: "Select Location",
            LocationCarrouselKey.AVALIABLE_LOCATION: "available location",
            LocationCarrouselKey.AVALIABLE_LOCATIONS: "available locations",
            LocationCarrouselKey.LOADING: "Loading destinations...",
            LocationCarrouselKey.EMPTY_STATE: "No locations available right now.",
            LocationCarrouselKey.ARIA_LABEL: "Popular destinations",
        },
        "es": {
            LocationCarrouselKey.SELECT_LOCATION: "Seleccionar ubicación",
            LocationCarrouselKey.AVALIABLE_LOCATION: "ubicación disponible",
            LocationCarrouselKey.AVALIABLE_LOCATIONS: "ubicaciones disponibles",
            LocationCarrouselKey.LOADING: "Cargando destinos...",
            LocationCarrouselKey.EMPTY_STATE: "Ningún destino disponible por ahora.",
            LocationCarrouselKey.ARIA_LABEL: "Destinos populares",
        },
    },
    surface=Surface.FRONTEND,
)


class SupplierPageKey(str, Enum):
    SUPPLIERS_TITLE = "SUPPLIERS_TITLE"
    SUPPLIERS_LOADING = "SUPPLIERS_LOADING"
    SUPPLIERS_ERROR = "SUPPLIERS_ERROR"
    SUPPLIERS_RETRY = "SUPPLIERS_RETRY"
    SUPPLIERS_A11Y = "SUPPLIERS_A11Y"


supplier_page = Catalog(
    "supplier-page",
    SupplierPageKey,
    {
        "fr": {
            SupplierPageKey.SUPPLIERS_TITLE: "Agences partenaires certifiées Plany",
            SupplierPageKey.SUPPLIERS_LOADING: "Chargement de la liste des agences...",
            SupplierPageKey.SUPPLIERS_ERROR: "Une erreur est survenue lors du chargement des agences.",
            SupplierPageKey.SUPPLIERS_RETRY: "Relancer le chargement",
            SupplierPageKey.SUPPLIERS_A11Y: "Section listant les agences partenaires.",
        },
        "en": {
            SupplierPageKey.SUPPLIERS_TITLE: "Certified Plany partner agencies",
            SupplierPageKey.SUPPLIERS_LOADING: "Loading the supplier list...",
            SupplierPageKey.SUPPLIERS_ERROR: "An error occurred while loading suppliers.",
            SupplierPageKey.SUPPLIERS_RETRY: "Reload list",
            SupplierPageKey.SUPPLIERS_A11Y: "Section listing partner agencies.",
        },
        "es": {
            SupplierPageKey.SUPPLIERS_TITLE: "Agencias asociadas certificadas por Plany",
            SupplierPageKey.SUPPLIERS_LOADING: "Cargando la lista de agencias...",
            SupplierPageKey.SUPPLIERS_ERROR: "Se produjo un error al cargar las agencias.",
            SupplierPageKey.SUPPLIERS_RETRY: "Recargar lista",
            SupplierPageKey.SUPPLIERS_A11Y: "Sección que muestra las agencias asociadas.",
        },
    },
    surface=Surface.FRONTEND,
)


class SignInKey(str, Enum):
    SIGN_IN_HEADING = "SIGN_IN_HEADING"
    SIGN_IN = "SIGN_IN"
    SIGN_UP = "SIGN_UP"
    ERROR_IN_SIGN_IN = "ERROR_IN_SIGN_IN"
    IS_BLACKLISTED = "IS_BLACKLISTED"
    RESET_PASSWORD = "RESET_PASSWORD"


sign_in = Catalog(
    "sign-in",
    SignInKey,
    {
        "fr": {
            SignInKey.SIGN_IN_HEADING: "Connexion",
            SignInKey.SIGN_IN: "Se connecter",
            SignInKey.SIGN_UP: "S'inscrire",
            SignInKey.ERROR_IN_SIGN_IN: "E-mail ou mot de passe incorrect.",
            SignInKey.IS_BLACKLISTED: "Votre compte est suspendu.",
            SignInKey.RESET_PASSWORD: "Mot de passe oublié ?",
        },
        "en": {
            SignInKey.SIGN_IN_HEADING: "Sign in",
            SignInKey.SIGN_IN: "Sign in",
            SignInKey.SIGN_UP: "Sign up",
            SignInKey.ERROR_IN_SIGN_IN: "Incorrect email or password.",
            SignInKey.IS_BLACKLISTED: "Your account is suspended.",
            SignInKey.RESET_PASSWORD: "Forgot password?",
        },
    },
    surface=Surface.FRONTEND,
)


def _deposit_limit(
    label: str, value: int, currency: str, prefix_currency: bool = False
) -> str:
    if prefix_currency:
        return f"{label} {currency}{value}"
    return f"{label} {value} {currency}"


class CarsKey(str, Enum):
    NEW_CAR = "NEW_CAR"
    DELETE_CAR = "DELETE_CAR"
    FUEL_POLICY = "FUEL_POLICY"
    DIESEL = "DIESEL"
    GASOLINE = "GASOLINE"
    ELECTRIC = "ELECTRIC"
    HYBRID = "HYBRID"
    PLUG_IN_HYBRID = "PLUG_IN_HYBRID"
    UNKNOWN = "UNKNOWN"
    DIESEL_SHORT = "DIESEL_SHORT"
    GASOLINE_SHORT = "GASOLINE_SHORT"
    ELECTRIC_SHORT = "ELECTRIC_SHORT"
    HYBRID_SHORT = "HYBRID_SHORT"
    PLUG_IN_HYBRID_SHORT = "PLUG_IN_HYBRID_SHORT"
    GEARBOX_MANUAL = "GEARBOX_MANUAL"
    GEARBOX_AUTOMATIC = "GEARBOX_AUTOMATIC"
    GEARBOX_MANUAL_SHORT = "GEARBOX_MANUAL_SHORT"
    GEARBOX_AUTOMATIC_SHORT = "GEARBOX_AUTOMATIC_SHORT"
    FUEL_POLICY_LIKE_FOR_LIKE = "FUEL_POLICY_LIKE_FOR_LIKE"
    FUEL_POLICY_FREE_TANK = "FUEL_POLICY_FREE_TANK"
    DIESEL_TOOLTIP = "DIESEL_TOOLTIP"
    GASOLINE_TOOLTIP = "GASOLINE_TOOLTIP"
    ELECTRIC_TOOLTIP = "ELECTRIC_TOOLTIP"
    HYBRID_TOOLTIP = "HYBRID_TOOLTIP"
    PLUG_IN_HYBRID_TOOLTIP = "PLUG_IN_HYBRID_TOOLTIP"
    GEARBOX_MANUAL_TOOLTIP = "GEARBOX_MANUAL_TOOLTIP"
    GEARBOX_AUTOMATIC_TOOLTIP = "GEARBOX_AUTOMATIC_TOOLTIP"
    SEATS_TOOLTIP_1 = "SEATS_TOOLTIP_1"
    SEATS_TOOLTIP_2 = "SEATS_TOOLTIP_2"
    DOORS_TOOLTIP_1 = "DOORS_TOOLTIP_1"
    DOORS_TOOLTIP_2 = "DOORS_TOOLTIP_2"
    AIRCON_TOOLTIP = "AIRCON_TOOLTIP"
    FUEL_POLICY_LIKE_FOR_LIKE_TOOLTIP = "FUEL_POLICY_LIKE_FOR_LIKE_TOOLTIP"
    FUEL_POLICY_FREE_TANK_TOOLTIP = "FUEL_POLICY_FREE_TANK_TOOLTIP"
    MILEAGE = "MILEAGE"
    MILEAGE_UNIT = "MILEAGE_UNIT"
    UNLIMITED = "UNLIMITED"
    LIMITED = "LIMITED"
    CANCELLATION = "CANCELLATION"
    CANCELLATION_TOOLTIP = "CANCELLATION_TOOLTIP"
    AMENDMENTS = "AMENDMENTS"
    AMENDMENTS_TOOLTIP = "AMENDMENTS_TOOLTIP"
    THEFT_PROTECTION = "THEFT_PROTECTION"
    THEFT_PROTECTION_TOOLTIP = "THEFT_PROTECTION_TOOLTIP"
    COLLISION_DAMAGE_WAVER = "COLLISION_DAMAGE_WAVER"
    COLLISION_DAMAGE_WAVER_TOOLTIP = "COLLISION_DAMAGE_WAVER_TOOLTIP"
    FULL_INSURANCE = "FULL_INSURANCE"
    FULL_INSURANCE_TOOLTIP = "FULL_INSURANCE_TOOLTIP"
    ADDITIONAL_DRIVER = "ADDITIONAL_DRIVER"
    INCLUDED = "INCLUDED"
    UNAVAILABLE = "UNAVAILABLE"
    CAR_AVAILABLE = "CAR_AVAILABLE"
    CAR_AVAILABLE_TOOLTIP = "CAR_AVAILABLE_TOOLTIP"
    CAR_UNAVAILABLE = "CAR_UNAVAILABLE"
    CAR_UNAVAILABLE_TOOLTIP = "CAR_UNAVAILABLE_TOOLTIP"
    VIEW_CAR = "VIEW_CAR"
    EMPTY_LIST = "EMPTY_LIST"
    BOOK = "BOOK"
    PRICE_DAYS_PART_1 = "PRICE_DAYS_PART_1"
    PRICE_DAYS_PART_2 = "PRICE_DAYS_PART_2"
    PRICE_PER_DAY = "PRICE_PER_DAY"
    GEARBOX = "GEARBOX"
    ENGINE = "ENGINE"
    DEPOSIT = "DEPOSIT"
    DEPOSIT_TOOLTIP = "DEPOSIT_TOOLTIP"
    DRIVER_LICENSE = "DRIVER_LICENSE"
    DRIVER_LICENSE_TOOLTIP = "DRIVER_LICENSE_TOOLTIP"
    LESS_THAN_VALUE_1 = "LESS_THAN_VALUE_1"
    LESS_THAN_VALUE_2 = "LESS_THAN_VALUE_2"
    LESS_THAN_VALUE_3 = "LESS_THAN_VALUE_3"
    TRIPS = "TRIPS"
    CO2 = "CO2"
    FROM_YOU = "FROM_YOU"
    TITLE_1 = "TITLE_1"
    TITLE_2 = "TITLE_2"
    TITLE_CAR_AVAILABLE = "TITLE_CAR_AVAILABLE"
    TITLE_CARS_AVAILABLE = "TITLE_CARS_AVAILABLE"


def create_cars_catalog(settings: Settings) -> Catalog[CarsKey]:
    """Build the car list catalog.

    The deposit filter labels embed the configured thresholds and currency.
    English places a "$" currency before the amount, every other table
    writes it after.

    Args:
        settings: Settings carrying the currency and deposit thresholds.

    Returns:
        The ``cars`` catalog of the customer site.
    """
    limits = (
        settings.deposit_filter_value_1,
        settings.deposit_filter_value_2,
        settings.deposit_filter_value_3,
    )
    us = settings.currency == "$"

    return Catalog(
        "cars",
        CarsKey,
        {
            "fr": {
                CarsKey.NEW_CAR: "Nouvelle voiture",
                CarsKey.DELETE_CAR: "Êtes-vous sûr de vouloir supprimer cette voiture ?",
                CarsKey.FUEL_POLICY: "Politique carburant",
                CarsKey.DIESEL: "Diesel",
                CarsKey.GASOLINE: "Essence",
                CarsKey.ELECTRIC: "Électrique",
                CarsKey.HYBRID: "Hybride",
                CarsKey.PLUG_IN_HYBRID: "Hybride rechargeable",
                CarsKey.UNKNOWN: "Non spécifié",
                CarsKey.DIESEL_SHORT: "D",
                CarsKey.GASOLINE_SHORT: "E",
                CarsKey.ELECTRIC_SHORT: "ELEC",
                CarsKey.HYBRID_SHORT: "H",
                CarsKey.PLUG_IN_HYBRID_SHORT: "HR",
                CarsKey.GEARBOX_MANUAL: "Manuelle",
                CarsKey.GEARBOX_AUTOMATIC: "Automatique",
                CarsKey.GEARBOX_MANUAL_SHORT: "M",
                CarsKey.GEARBOX_AUTOMATIC_SHORT: "A",
                CarsKey.FUEL_POLICY_LIKE_FOR_LIKE: "Plein/Plein",
                CarsKey.FUEL_POLICY_FREE_TANK: "Plein inclus",
                CarsKey.DIESEL_TOOLTIP: "Cette voiture a un moteur diesel",
                CarsKey.GASOLINE_TOOLTIP: "Cette voiture a un moteur essence",
                CarsKey.ELECTRIC_TOOLTIP: "Cette voiture est électrique",
                CarsKey.HYBRID_TOOLTIP: "Cette voiture est hybride",
                CarsKey.PLUG_IN_HYBRID_TOOLTIP: "Cette voiture est hybride rechargeable",
                CarsKey.GEARBOX_MANUAL_TOOLTIP: "Cette voiture a une transmission manuelle",
                CarsKey.GEARBOX_AUTOMATIC_TOOLTIP: "Cette voiture a une transmission automatique",
                CarsKey.SEATS_TOOLTIP_1: "Cette voiture a ",
                CarsKey.SEATS_TOOLTIP_2: "sièges",
                CarsKey.DOORS_TOOLTIP_1: "Cette voiture a ",
                CarsKey.DOORS_TOOLTIP_2: "portes",
                CarsKey.AIRCON_TOOLTIP: "Cette voiture a de la climatisation",
                CarsKey.FUEL_POLICY_LIKE_FOR_LIKE_TOOLTIP: "Cette voiture est fournie avec du carburant dans le réservoir et doit être rendu avec la même quantité de carburant.",
                CarsKey.FUEL_POLICY_FREE_TANK_TOOLTIP: "Le prix inclut un plein de carburant",
                CarsKey.MILEAGE: "Kilométrage",
                CarsKey.MILEAGE_UNIT: "KM/jour",
                CarsKey.UNLIMITED: "Illimité",
                CarsKey.LIMITED: "Limité",
                CarsKey.CANCELLATION: "Annulation",
                CarsKey.CANCELLATION_TOOLTIP: "La réservation peut être annulée avant la date de commencement de la location.",
                CarsKey.AMENDMENTS: "Modifications",
                CarsKey.AMENDMENTS_TOOLTIP: "La réservation peut être modifiée avant la date de commencement de la location.",
                CarsKey.THEFT_PROTECTION: "Protection contre le vol",
                CarsKey.THEFT_PROTECTION_TOOLTIP: "La location peut inclure une protection contre le vol.",
                CarsKey.COLLISION_DAMAGE_WAVER: "Couverture en cas de collision",
                CarsKey.COLLISION_DAMAGE_WAVER_TOOLTIP: "La location peut inclure une couverture en cas de collision.",
                CarsKey.FULL_INSURANCE: "Assurance Tous Risques",
                CarsKey.FULL_INSURANCE_TOOLTIP: "La location peut inclure une couverture en cas de collision, de dommages et vol du véhicule.",
                CarsKey.ADDITIONAL_DRIVER: "Conducteur supplémentaire",
                CarsKey.INCLUDED: "Inclus",
                CarsKey.UNAVAILABLE: "Indisponible",
                CarsKey.CAR_AVAILABLE: "Disponible à la location",
                CarsKey.CAR_AVAILABLE_TOOLTIP: "Cette voiture est disponible pour la location.",
                CarsKey.CAR_UNAVAILABLE: "Indisponible pour la location",
                CarsKey.CAR_UNAVAILABLE_TOOLTIP: "Cette voiture n'est pas disponible pour la location.",
                CarsKey.VIEW_CAR: "Voir cette voiture",
                CarsKey.EMPTY_LIST: "Pas de voitures.",
                CarsKey.BOOK: "Réserver",
                CarsKey.PRICE_DAYS_PART_1: "Prix pour",
                CarsKey.PRICE_DAYS_PART_2: "jour",
                CarsKey.PRICE_PER_DAY: "Prix par jour :",
                CarsKey.GEARBOX: "Transmission",
                CarsKey.ENGINE: "Moteur",
                CarsKey.DEPOSIT: "Dépôt de garantie",
                CarsKey.DEPOSIT_TOOLTIP: "Caution remboursable demandée pour garantir la location, restituée après le retour du véhicule en bon état.",
                CarsKey.DRIVER_LICENSE: "Ancienneté minimale du permis",
                CarsKey.DRIVER_LICENSE_TOOLTIP: "Cette agence exige que votre permis de conduire ait une ancienneté minimale pour louer un véhicule.",
                CarsKey.LESS_THAN_VALUE_1: _deposit_limit(
                    "Moins de", limits[0], settings.currency
                ),
                CarsKey.LESS_THAN_VALUE_2: _deposit_limit(
                    "Moins de", limits[1], settings.currency
                ),
                CarsKey.LESS_THAN_VALUE_3: _deposit_limit(
                    "Moins de", limits[2], settings.currency
                ),
                CarsKey.TRIPS: "locations",
                CarsKey.CO2: "Effet CO2",
                CarsKey.FROM_YOU: " de vous",
                CarsKey.TITLE_1: "Avec ",
                CarsKey.TITLE_2: ", trouvez la voiture qui correspond à vos besoins",
                CarsKey.TITLE_CAR_AVAILABLE: "voiture disponible",
                CarsKey.TITLE_CARS_AVAILABLE: "voitures disponibles",
            },
            "en": {
                CarsKey.NEW_CAR: "New car",
                CarsKey.DELETE_CAR: "Are you sure you want to delete this car?",
                CarsKey.FUEL_POLICY: "Fuel policy",
                CarsKey.DIESEL: "Diesel",
                CarsKey.GASOLINE: "Gasoline",
                CarsKey.ELECTRIC: "Electric",
                CarsKey.HYBRID: "Hybrid",
                CarsKey.PLUG_IN_HYBRID: "Plug-in hybrid",
                CarsKey.UNKNOWN: "Not specified",
                CarsKey.DIESEL_SHORT: "D",
                CarsKey.GASOLINE_SHORT: "G",
                CarsKey.ELECTRIC_SHORT: "E",
                CarsKey.HYBRID_SHORT: "H",
                CarsKey.PLUG_IN_HYBRID_SHORT: "PH",
                CarsKey.GEARBOX_MANUAL: "Manual",
                CarsKey.GEARBOX_AUTOMATIC: "Automatic",
                CarsKey.GEARBOX_MANUAL_SHORT: "M",
                CarsKey.GEARBOX_AUTOMATIC_SHORT: "A",
                CarsKey.FUEL_POLICY_LIKE_FOR_LIKE: "Like for Like",
                CarsKey.FUEL_POLICY_FREE_TANK: "Free tank",
                CarsKey.DIESEL_TOOLTIP: "This car has a diesel engine",
                CarsKey.GASOLINE_TOOLTIP: "This car has a gasoline engine",
                CarsKey.ELECTRIC_TOOLTIP: "This car is electric",
                CarsKey.HYBRID_TOOLTIP: "This car is hybrid",
                CarsKey.PLUG_IN_HYBRID_TOOLTIP: "This car is plug-in hybrid",
                CarsKey.GEARBOX_MANUAL_TOOLTIP: "This car has a manual gearbox",
                CarsKey.GEARBOX_AUTOMATIC_TOOLTIP: "This car has an automatic gearbox",
                CarsKey.SEATS_TOOLTIP_1: "This car has ",
                CarsKey.SEATS_TOOLTIP_2: "seats",
                CarsKey.DOORS_TOOLTIP_1: "This car has ",
                CarsKey.DOORS_TOOLTIP_2: "doors",
                CarsKey.AIRCON_TOOLTIP: "This car has aircon",
                CarsKey.FUEL_POLICY_LIKE_FOR_LIKE_TOOLTIP: "This car is supplied with fuel and must be returned with the same amount of fuel.",
                CarsKey.FUEL_POLICY_FREE_TANK_TOOLTIP: "The price includes a full tank of fuel.",
                CarsKey.MILEAGE: "Mileage",
                CarsKey.MILEAGE_UNIT: "KM/day",
                CarsKey.UNLIMITED: "Unlimited",
                CarsKey.LIMITED: "Limited",
                CarsKey.CANCELLATION: "Cancellation",
                CarsKey.CANCELLATION_TOOLTIP: "The booking can be canceled before the start date of the rental.",
                CarsKey.AMENDMENTS: "Amendments",
                CarsKey.AMENDMENTS_TOOLTIP: "The booking can be modified before the start date of the rental.",
                CarsKey.THEFT_PROTECTION: "Theft protection",
                CarsKey.THEFT_PROTECTION_TOOLTIP: "Rental may include theft protection.",
                CarsKey.COLLISION_DAMAGE_WAVER: "Collision damage waiver",
                CarsKey.COLLISION_DAMAGE_WAVER_TOOLTIP: "Rental may include collision damage waiver.",
                CarsKey.FULL_INSURANCE: "Full insurance",
                CarsKey.FULL_INSURANCE_TOOLTIP: "The rental may include collision damage waiver and theft protection of the vehicle.",
                CarsKey.ADDITIONAL_DRIVER: "Additional driver",
                CarsKey.INCLUDED: "Included",
                CarsKey.UNAVAILABLE: "Unavailable",
                CarsKey.CAR_AVAILABLE: "Available for rental",
                CarsKey.CAR_AVAILABLE_TOOLTIP: "This car is available for rental.",
                CarsKey.CAR_UNAVAILABLE: "Unavailable for rental",
                CarsKey.CAR_UNAVAILABLE_TOOLTIP: "This car is unavailable for rental.",
                CarsKey.VIEW_CAR: "View this car",
                CarsKey.EMPTY_LIST: "No cars.",
                CarsKey.BOOK: "Choose this car",
                CarsKey.PRICE_DAYS_PART_1: "Price for",
                CarsKey.PRICE_DAYS_PART_2: "day",
                CarsKey.PRICE_PER_DAY: "Price per day:",
                CarsKey.GEARBOX: "Gearbox",
                CarsKey.ENGINE: "Engine",
                CarsKey.DEPOSIT: "Deposit at pick-up",
                CarsKey.LESS_THAN_VALUE_1: _deposit_limit(
                    "Less than", limits[0], settings.currency, prefix_currency=us
                ),
                CarsKey.LESS_THAN_VALUE_2: _deposit_limit(
                    "Less than", limits[1], settings.currency, prefix_currency=us
                ),
                CarsKey.LESS_THAN_VALUE_3: _deposit_limit(
                    "Less than", limits[2], settings.currency, prefix_currency=us
                ),
                CarsKey.TRIPS: "trips",
                CarsKey.CO2: "CO2 effect",
                CarsKey.FROM_YOU: " from you",
                CarsKey.TITLE_1: "Auto ",
                CarsKey.TITLE_2: " for you",
                CarsKey.TITLE_CAR_AVAILABLE: "car available",
                CarsKey.TITLE_CARS_AVAILABLE: "cars available",
            },
            "es": {
                CarsKey.NEW_CAR: "Coche nuevo",
                CarsKey.DELETE_CAR: "¿Está seguro de que desea eliminar este coche?",
                CarsKey.FUEL_POLICY: "Política de combustible",
                CarsKey.DIESEL: "Diésel",
                CarsKey.GASOLINE: "Gasolina",
                CarsKey.ELECTRIC: "Eléctrico",
                CarsKey.HYBRID: "Híbrido",
                CarsKey.PLUG_IN_HYBRID: "Híbrido enchufable",
                CarsKey.UNKNOWN: "No especificado",
                CarsKey.DIESEL_SHORT: "D",
                CarsKey.GASOLINE_SHORT: "G",
                CarsKey.ELECTRIC_SHORT: "E",
                CarsKey.HYBRID_SHORT: "H",
                CarsKey.PLUG_IN_HYBRID_SHORT: "HE",
                CarsKey.GEARBOX_MANUAL: "Manual",
                CarsKey.GEARBOX_AUTOMATIC: "Automático",
                CarsKey.GEARBOX_MANUAL_SHORT: "M",
                CarsKey.GEARBOX_AUTOMATIC_SHORT: "A",
                CarsKey.FUEL_POLICY_LIKE_FOR_LIKE: "Lleno por lleno",
                CarsKey.FUEL_POLICY_FREE_TANK: "Tanque lleno incluido",
                CarsKey.DIESEL_TOOLTIP: "Este coche tiene un motor diésel",
                CarsKey.GASOLINE_TOOLTIP: "Este coche tiene un motor de gasolina",
                CarsKey.ELECTRIC_TOOLTIP: "Este coche es eléctrico",
                CarsKey.HYBRID_TOOLTIP: "Este coche es híbrido",
                CarsKey.PLUG_IN_HYBRID_TOOLTIP: "Este coche es híbrido enchufable",
                CarsKey.GEARBOX_MANUAL_TOOLTIP: "Este coche tiene una caja de cambios manual",
                CarsKey.GEARBOX_AUTOMATIC_TOOLTIP: "Este coche tiene una caja de cambios automática",
                CarsKey.SEATS_TOOLTIP_1: "Este coche tiene ",
                CarsKey.SEATS_TOOLTIP_2: "asientos",
                CarsKey.DOORS_TOOLTIP_1: "Este coche tiene ",
                CarsKey.DOORS_TOOLTIP_2: "puertas",
                CarsKey.AIRCON_TOOLTIP: "Este coche tiene aire acondicionado",
                CarsKey.FUEL_POLICY_LIKE_FOR_LIKE_TOOLTIP: "Este coche se entrega con combustible y debe ser devuelto con la misma cantidad.",
                CarsKey.FUEL_POLICY_FREE_TANK_TOOLTIP: "El precio incluye un tanque lleno de combustible.",
                CarsKey.MILEAGE: "Kilometraje",
                CarsKey.MILEAGE_UNIT: "KM/día",
                CarsKey.UNLIMITED: "Ilimitado",
                CarsKey.LIMITED: "Limitado",
                CarsKey.CANCELLATION: "Cancelación",
                CarsKey.CANCELLATION_TOOLTIP: "La reserva puede ser cancelada antes de la fecha de inicio del alquiler.",
                CarsKey.AMENDMENTS: "Modificaciones",
                CarsKey.AMENDMENTS_TOOLTIP: "La reserva puede ser modificada antes de la fecha de inicio del alquiler.",
                CarsKey.THEFT_PROTECTION: "Protección contra robo",
                CarsKey.THEFT_PROTECTION_TOOLTIP: "El alquiler puede incluir protección contra robo.",
                CarsKey.COLLISION_DAMAGE_WAVER: "Renuncia de daños por colisión",
                CarsKey.COLLISION_DAMAGE_WAVER_TOOLTIP: "El alquiler puede incluir una renuncia por daños por colisión.",
                CarsKey.FULL_INSURANCE: "Seguro a todo riesgo",
                CarsKey.FULL_INSURANCE_TOOLTIP: "El alquiler puede incluir renuncia por colisión y protección contra robo del vehículo.",
                CarsKey.ADDITIONAL_DRIVER: "Conductor adicional",
                CarsKey.INCLUDED: "Incluido",
                CarsKey.UNAVAILABLE: "No disponible",
                CarsKey.CAR_AVAILABLE: "Disponible para alquiler",
                CarsKey.CAR_AVAILABLE_TOOLTIP: "Este coche está disponible para alquiler.",
                CarsKey.CAR_UNAVAILABLE: "No disponible para alquiler",
                CarsKey.CAR_UNAVAILABLE_TOOLTIP: "Este coche no está disponible para alquiler.",
                CarsKey.VIEW_CAR: "Ver este coche",
                CarsKey.EMPTY_LIST: "No hay coches.",
                CarsKey.BOOK: "Elegir este coche",
                CarsKey.PRICE_DAYS_PART_1: "Precio por",
                CarsKey.PRICE_DAYS_PART_2: "día",
                CarsKey.PRICE_PER_DAY: "Precio por día:",
                CarsKey.GEARBOX: "Caja de cambios",
                CarsKey.ENGINE: "Motor",
                CarsKey.DEPOSIT: "Depósito al recoger",
                CarsKey.LESS_THAN_VALUE_1: _deposit_limit(
                    "Menos de", limits[0], settings.currency
                ),
                CarsKey.LESS_THAN_VALUE_2: _deposit_limit(
                    "Menos de", limits[1], settings.currency
                ),
                CarsKey.LESS_THAN_VALUE_3: _deposit_limit(
                    "Menos de", limits[2], settings.currency
                ),
                CarsKey.TRIPS: "viajes",
                CarsKey.CO2: "Efecto CO2",
                CarsKey.FROM_YOU: " de ti",
                CarsKey.TITLE_1: "Auto ",
                CarsKey.TITLE_2: " para ti",
                CarsKey.TITLE_CAR_AVAILABLE: "coche disponible",
                CarsKey.TITLE_CARS_AVAILABLE: "coches disponibles",
            },
        },
        surface=Surface.FRONTEND,
    )


def create_catalogs(settings: Settings) -> tuple[Catalog, ...]:
    """Return every catalog of the customer site, ordered by group name."""
    return (
        activate,
        bookings,
        car_range_filter,
        create_cars_catalog(settings),
        contact_form,
        footer,
        home,
        location_carrousel,
        notifications,
        reset_password,
        search,
        sign_in,
        sign_up,
        supplier_page,
    )
